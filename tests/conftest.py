import mongomock
import pytest


@pytest.fixture
def mongo_client():
    client = mongomock.MongoClient()
    try:
        yield client
    finally:
        client.close()


@pytest.fixture
def db(mongo_client):
    return mongo_client["extraction_test_db"]
