""" Misc utilities """

from collections.abc import Mapping


class Undefined(object):
    """ Special singleton object to represent the case when no value was provided.

    This value is never equal to anything: this makes sure it will never match any condition.
    """

    _instance = None

    def __new__(cls):
        # Singleton
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other):
        return False

    def __ne__(self, other):
        return True

    __hash__ = object.__hash__

    def __repr__(self):
        return '<Undefined>'


class const:
    """ Misc constants """

    #: Undefined singleton
    UNDEFINED = Undefined()


def is_absent(value):
    """ Test whether the value counts as "not provided".

    A missing key and an explicit `None` are the same thing.

    :rtype: bool
    """
    return value is None or value is const.UNDEFINED


def get_field(value, field):
    """ Get a field from an input value.

    Anything that's not a mapping has no fields at all.

    :param value: Input value
    :param field: Field name
    :type field: str
    :return: The field value, or `const.UNDEFINED`
    """
    if isinstance(value, Mapping):
        return value.get(field, const.UNDEFINED)
    return const.UNDEFINED


def iter_fields(value):
    """ Iterate over the field names of an input value, in input order.

    :rtype: Iterable
    """
    if isinstance(value, Mapping):
        return iter(value)
    return iter(())
