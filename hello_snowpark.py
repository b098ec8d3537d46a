from snowflake.snowpark import Session, DataFrame
from snowflake.snowpark.types import StructType, StructField, IntegerType, StringType
import sys
import logging

# initiate logging at info level
logging.basicConfig(stream=sys.stdout, level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s', datefmt='%I:%M:%S')

# (id, name) rows, positional with build_schema()
SAMPLE_ROWS = [(1, "Ram"), (2, "Hari")]

def get_connection_parameters() -> dict:
    # replace the placeholders before running against a real account
    return {
        "ACCOUNT":"<your_account>",
        "USER":"<your_username>",
        "PASSWORD":"<your_password>",
        "ROLE":"<your_role>",
        "WAREHOUSE":"<your_warehouse>",
        "DATABASE":"<your_database>",
        "SCHEMA":"<your_schema>"
    }

# snowpark session
def get_snowpark_session() -> Session:
    connection_parameters = get_connection_parameters()
    # creating snowflake session object
    return Session.builder.configs(connection_parameters).create()

def build_schema() -> StructType:
    return StructType([
        StructField("id", IntegerType()),
        StructField("name", StringType())
    ])

def create_sample_dataframe(session) -> DataFrame:
    return session.create_dataframe(SAMPLE_ROWS, schema=build_schema())

def main():
    session = get_snowpark_session()
    logging.info("snowpark session created")

    # close exactly once, even when create/show fails
    try:
        sample_df = create_sample_dataframe(session)
        logging.info("sample dataframe created")

        # display the dataframe contents
        sample_df.show()
    finally:
        session.close()
        logging.info("snowpark session closed")

if __name__ == '__main__':
    main()
