"""Shared pytest fixtures for schema-interfaces tests."""

import pytest
from typing import Any, Dict, List, Optional

from schema_interfaces.codegen.core.config import GeneratorConfig, resolve_config
from schema_interfaces.codegen.core.schema import convert_dmmf


def make_field(
    name: str,
    kind: str,
    type_: str,
    is_required: bool = True,
    is_list: bool = False,
) -> Dict[str, Any]:
    """Build a DMMF field entry."""
    return {
        "name": name,
        "kind": kind,
        "type": type_,
        "isRequired": is_required,
        "isList": is_list,
    }


def make_datamodel(
    enums: Optional[List[Dict[str, Any]]] = None,
    models: Optional[List[Dict[str, Any]]] = None,
    types: Optional[List[Dict[str, Any]]] = None,
) -> Dict[str, Any]:
    """Build a DMMF datamodel object."""
    return {"enums": enums or [], "models": models or [], "types": types or []}


@pytest.fixture
def role_enum():
    """The Role enum as DMMF describes it."""
    return {"name": "Role", "values": [{"name": "ADMIN"}, {"name": "USER"}]}


@pytest.fixture
def user_model():
    """A User model with a required scalar, a nullable scalar and a relation list."""
    return {
        "name": "User",
        "fields": [
            make_field("id", "scalar", "Int"),
            make_field("bio", "scalar", "String", is_required=False),
            make_field("role", "enum", "Role"),
            make_field("posts", "object", "Post", is_required=False, is_list=True),
        ],
    }


@pytest.fixture
def post_model():
    """A Post model with an optional back relation and JSON metadata."""
    return {
        "name": "Post",
        "fields": [
            make_field("id", "scalar", "Int"),
            make_field("title", "scalar", "String"),
            make_field("meta", "scalar", "Json"),
            make_field("author", "object", "User", is_required=False),
            make_field("address", "object", "Address", is_required=False),
        ],
    }


@pytest.fixture
def address_type():
    """A composite type."""
    return {
        "name": "Address",
        "fields": [
            make_field("street", "scalar", "String"),
            make_field("zip", "scalar", "String", is_required=False),
        ],
    }


@pytest.fixture
def sample_datamodel(role_enum, user_model, post_model, address_type):
    """Datamodel with one enum, two models and one composite type."""
    return make_datamodel(
        enums=[role_enum], models=[user_model, post_model], types=[address_type]
    )


@pytest.fixture
def sample_document(sample_datamodel):
    """Full generator options document as the host hands it over."""
    return {
        "dmmf": {"datamodel": sample_datamodel},
        "generator": {
            "name": "interfaces",
            "config": {"modelSuffix": "Model"},
            "output": {"value": "generated/interfaces.ts"},
        },
    }


@pytest.fixture
def parsed_datamodel(sample_datamodel):
    """The sample datamodel converted to the internal representation."""
    return convert_dmmf(sample_datamodel)


@pytest.fixture
def default_config():
    """Configuration with every option at its default."""
    return GeneratorConfig()


@pytest.fixture
def config_factory():
    """Build a configuration from raw string options."""

    def factory(**options) -> GeneratorConfig:
        return resolve_config(options)

    return factory


class FakeFormatter:
    """Stand-in for PrettierFormatter that records its calls."""

    def __init__(self, config_path: Optional[str] = "/project/.prettierrc"):
        self.config_path = config_path
        self.loaded = False
        self.resolved_for = None
        self.calls = []

    def load(self) -> str:
        self.loaded = True
        return "prettier"

    def resolve_config(self, file_path):
        self.resolved_for = file_path
        return self.config_path

    def format(self, source, parser="typescript", config_path=None, file_path=None):
        self.calls.append(
            {"parser": parser, "config_path": config_path, "file_path": file_path}
        )
        return "// formatted\n" + source


@pytest.fixture
def fake_formatter():
    """A formatter that never starts a process."""
    return FakeFormatter()
