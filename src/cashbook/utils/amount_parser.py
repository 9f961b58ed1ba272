"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation
import re

THOUSANDS_RE = re.compile(r"^[-+]?[1-9]\d{0,2}(\.\d{3})+$")


def parse_amount(amount_str: str) -> Decimal:
    """Parse an amount string into a Decimal.

    Handles various formats:
    - "123.45"
    - "R$ 123,45"
    - "$1,234.56"
    - "1.234,56" (comma as decimal separator)
    - "R$ 1.234" or "1.234.567" (dots as thousands separators)
    - "-123.45"
    - "(123.45)" (negative in parentheses)

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    amount_str = amount_str.strip()

    is_negative = False
    if amount_str.startswith("(") and amount_str.endswith(")"):
        is_negative = True
        amount_str = amount_str[1:-1]

    is_real = "R$" in amount_str
    # Currency symbols
    amount_str = re.sub(r"R\$|[$€£¥]", "", amount_str).strip()

    # Whichever separator comes last is the decimal separator
    if "," in amount_str and amount_str.rfind(",") > amount_str.rfind("."):
        amount_str = amount_str.replace(".", "").replace(",", ".")
    elif "," in amount_str:
        amount_str = amount_str.replace(",", "")
    elif THOUSANDS_RE.match(amount_str.replace(" ", "")):
        # Dots only, in groups of three: "1.234.567" or "R$ 1.234"
        if not is_real and amount_str.count(".") == 1:
            raise ValueError(
                f"Ambiguous amount '{amount_str}': use a comma for decimals or R$ for thousands"
            )
        amount_str = amount_str.replace(".", "")

    amount_str = amount_str.replace(" ", "")

    try:
        amount = Decimal(amount_str)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}': not a finite number")
    return -amount if is_negative else amount
