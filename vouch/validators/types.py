from math import isfinite

from .base import Validator


class StringType(Validator):
    """ Check that the value is a string.

    ```python
    from vouch import StringType

    schema = StringType('the message of the text')
    schema.validate('hello')  #-> True
    schema.validate(1)
    #-> ValidationError: invalid type for field
    ```
    """

    type_name = 'String'

    def validate_type(self, value):
        return isinstance(value, str)


class IntegerType(Validator):
    """ Check that the value is a whole number.

    Integral floats (e.g. `1.0`, as produced by some JSON encoders) are whole numbers too.
    Booleans and numeric strings are not: there's no coercion.

    ```python
    from vouch import IntegerType

    schema = IntegerType()
    schema.validate(10)  #-> True
    schema.validate(10.0)  #-> True
    schema.validate(10.5)
    #-> ValidationError: invalid type for field
    schema.validate('10')
    #-> ValidationError: invalid type for field
    ```
    """

    type_name = 'Integer'

    def validate_type(self, value):
        if isinstance(value, bool):
            return False
        if isinstance(value, int):
            return True
        return isinstance(value, float) and isfinite(value) and value.is_integer()


__all__ = ('StringType', 'IntegerType',)
