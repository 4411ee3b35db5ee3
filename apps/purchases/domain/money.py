from decimal import Decimal, InvalidOperation, ROUND_HALF_EVEN


def to_decimal(value) -> Decimal:
    """
    Convert a numeric value to Decimal through its string form.

    Floats go through str() so that 123.445 becomes Decimal("123.445")
    and not its binary approximation.

    Raises:
        InvalidOperation: if the value is not a number
    """
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        raise InvalidOperation(f"Not a decimal value: {value!r}")
    return Decimal(str(value).strip())


def round_half_even(value, digits: int = 2) -> Decimal:
    """
    Round to a fixed number of fractional digits using banker's rounding.

    Shared by transaction creation and currency conversion.

    Example:
        >>> round_half_even(Decimal("123.445"))
        Decimal('123.44')
        >>> round_half_even(Decimal("123.455"))
        Decimal('123.46')
    """
    exponent = Decimal(1).scaleb(-digits)
    return to_decimal(value).quantize(exponent, rounding=ROUND_HALF_EVEN)
