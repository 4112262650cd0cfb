from pydantic import ConfigDict, create_model, Field
from sqlalchemy.inspection import inspect
from sqlalchemy import String, Text
from sqlalchemy.types import Enum as SQLEnum
from typing import Optional, Union, List
import datetime
import enum

# Columns managed by the database; never accepted from clients
SERVER_MANAGED_FIELDS = ['id', 'created_at', 'updated_at']

def _is_enum_type(python_type):
    return isinstance(python_type, type) and issubclass(python_type, enum.Enum)

def _is_optional_type(type_hint):
    """Check if a type hint is Optional[T]"""
    return (getattr(type_hint, '__origin__', None) is Union and
            type(None) in type_hint.__args__)

def sqlalchemy_to_pydantic_type(column):
    """Convert a SQLAlchemy column type to a Python type, wrapped in Optional when nullable."""
    if isinstance(column.type, SQLEnum) and column.type.enum_class is not None:
        python_type = column.type.enum_class
    else:
        python_type = column.type.python_type

    if column.nullable:
        return Optional[python_type]
    return python_type


def get_column_default(column):
    """Default for the generated field; ``...`` marks a required field."""
    if column.default is not None and hasattr(column.default, 'arg'):
        default_value = column.default.arg
        # Callable defaults (sequences, factories) are produced on insert
        if callable(default_value):
            return None
        return default_value

    if column.server_default is not None or column.primary_key:
        return None

    if not column.nullable:
        return ...

    return None

def get_field_constraints(column):
    """Extract field constraints for validation"""
    constraints = {}
    if isinstance(column.type, SQLEnum):
        return constraints

    if isinstance(column.type, (String, Text)) and getattr(column.type, 'length', None):
        constraints['max_length'] = column.type.length

    return constraints

def _get_example_value(python_type, field_name: str):
    """Example values for OpenAPI docs"""
    base_type = python_type
    if _is_optional_type(python_type):
        non_none_args = [arg for arg in python_type.__args__ if arg is not type(None)]
        base_type = non_none_args[0] if non_none_args else str

    field_examples = {
        'email': 'student@example.com', 'phone': '+84901234567',
        'first_name': 'John', 'last_name': 'Doe', 'name': 'Lab 1',
        'location': 'Building A, 2nd floor',
    }
    if field_name in field_examples:
        return field_examples[field_name]

    if _is_enum_type(base_type):
        return next(iter(base_type)).value

    if base_type == str: return 'example string'
    elif base_type == int:
        return 30 if 'capacity' in field_name else 1
    elif base_type == datetime.datetime: return '2024-01-01T00:00:00Z'
    elif base_type == datetime.date: return '2005-01-01'
    return None

def create_pydantic_model_from_sqlalchemy(
    sqlalchemy_model,
    model_name: str,
    exclude_fields: List[str] = None,
    optional_fields: List[str] = None,
    forbid_extra: bool = False,
):
    """
    Build a pydantic model from the columns of a SQLAlchemy model.

    ``optional_fields`` are forced to ``Optional[T] = None`` (partial updates).
    With ``forbid_extra`` unknown keys are rejected, which turns the column set
    into the allow-list for request bodies.
    """
    exclude_fields = exclude_fields or []
    optional_fields = optional_fields or []

    fields = {}
    mapper = inspect(sqlalchemy_model)

    for column in mapper.columns:
        if column.name in exclude_fields:
            continue

        python_type = sqlalchemy_to_pydantic_type(column)
        default_value = get_column_default(column)

        if column.name in optional_fields:
            if not _is_optional_type(python_type):
                python_type = Optional[python_type]
            default_value = None

        field_kwargs = {
            'description': column.name.replace('_', ' ').title(),
            **get_field_constraints(column)
        }

        example_value = _get_example_value(python_type, column.name)
        if example_value is not None:
            field_kwargs['examples'] = [example_value]

        fields[column.name] = (python_type, Field(default=default_value, **field_kwargs))

    config = ConfigDict(from_attributes=True, extra='forbid' if forbid_extra else 'ignore')
    return create_model(model_name, __config__=config, **fields)

def generate_model_schemas(sqlalchemy_model):
    """Generate Create, Update, and Response schemas for a model"""
    model_name = sqlalchemy_model.__name__

    # Response schema (include everything); doubles as the resource transformer
    response_schema = create_pydantic_model_from_sqlalchemy(
        sqlalchemy_model,
        f"{model_name}Response"
    )

    create_schema = create_pydantic_model_from_sqlalchemy(
        sqlalchemy_model,
        f"{model_name}Create",
        exclude_fields=SERVER_MANAGED_FIELDS,
        forbid_extra=True
    )

    mapper = inspect(sqlalchemy_model)
    all_fields = [col.name for col in mapper.columns if col.name not in SERVER_MANAGED_FIELDS]

    update_schema = create_pydantic_model_from_sqlalchemy(
        sqlalchemy_model,
        f"{model_name}Update",
        exclude_fields=SERVER_MANAGED_FIELDS,
        optional_fields=all_fields,
        forbid_extra=True
    )

    return {
        'response': response_schema,
        'create': create_schema,
        'update': update_schema
    }
