from collections import abc


def filter_none(mapping: abc.Mapping) -> dict:
    """ Drop keys with `None` values

    Example:
        filter_none({'a': 1, 'b': None}) -> {'a': 1}
    """
    return {
        k: v
        for k, v in mapping.items()
        if v is not None
    }
