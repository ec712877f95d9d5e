""" Convert GraphQL literals (AST value nodes) into Python values """

from __future__ import annotations

from typing import Any, Optional

import graphql


def value_from_literal(node: graphql.ValueNode, variables: Optional[dict[str, Any]] = None) -> Any:
    """ Get a Python value from a GraphQL literal of any kind

    Supports: string, boolean, int, float, object, list, null, $variable.
    Every other kind (e.g. enum values) is an error.

    Args:
        node: The literal
        variables: Query variables (to resolve if referenced by name)

    Raises:
        graphql.GraphQLError: unsupported literal kind
    """
    if isinstance(node, (graphql.StringValueNode, graphql.BooleanValueNode)):
        return node.value
    elif isinstance(node, graphql.IntValueNode):
        return int(node.value)
    elif isinstance(node, graphql.FloatValueNode):
        return float(node.value)
    elif isinstance(node, graphql.ObjectValueNode):
        return {
            field.name.value: value_from_literal(field.value, variables)
            for field in node.fields
        }
    elif isinstance(node, graphql.ListValueNode):
        return [value_from_literal(value, variables) for value in node.values]
    elif isinstance(node, graphql.NullValueNode):
        return None
    elif isinstance(node, graphql.VariableNode):
        return variables.get(node.name.value) if variables else None
    else:
        raise graphql.GraphQLError(f'Unsupported literal kind: {node.kind}', node)
