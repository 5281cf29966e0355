"""Display formatting utilities"""


def format_amount(value: float) -> str:
    """Money with 2 decimals and a period separator, e.g. 'INR 8791.59'"""
    return f"INR {value:.2f}"


def format_rate(value: float) -> str:
    """Annual percentage with 2 decimals, e.g. '9.50%'"""
    return f"{value:.2f}%"
