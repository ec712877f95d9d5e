from __future__ import annotations

from sqlalchemy.orm import ColumnProperty, InstrumentedAttribute

from pagerql import exc


def resolve_column_by_name(field_name: str, Model: type, *, where: str) -> InstrumentedAttribute:
    """ Get a model column by name

    Raises:
        exc.InvalidColumnError: not found, or not a column
    """
    try:
        attribute = getattr(Model, field_name)
    except AttributeError as e:
        raise exc.InvalidColumnError(model_name(Model), field_name, where=where) from e

    # Check that it actually is a column
    if not is_column(attribute):
        raise exc.InvalidColumnError(model_name(Model), field_name, where=where)

    return attribute


def is_column(attribute) -> bool:
    return (
        isinstance(attribute, InstrumentedAttribute) and
        isinstance(attribute.property, ColumnProperty)
    )


def model_name(Model: type) -> str:
    return getattr(Model, '__name__', repr(Model))
