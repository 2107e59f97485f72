from pathlib import Path

import pytest

from json_schema_gen.pipeline import CodeGeneratorConfig
from json_schema_gen.pipeline.analyzer import NameResolver, TypeMapper
from json_schema_gen.pipeline.schema_ast import SchemaParser

TEST_DATA = Path(__file__).parent / "test_data"
SCHEMAS = TEST_DATA / "schemas"


@pytest.fixture
def config():
    return CodeGeneratorConfig()


@pytest.fixture
def mapper(config):
    return TypeMapper(NameResolver(), config)


@pytest.fixture
def parse():
    """Parse a schema dict into Schema nodes."""
    return SchemaParser().parse
