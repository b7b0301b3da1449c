# src/breeze_balance/utils.py


def mask_card_number(card_number: str, visible: int = 4) -> str:
    """Keep only the last `visible` characters of a card number for logging."""
    if not card_number:
        return ""
    card_number = str(card_number).strip()
    if len(card_number) <= visible:
        return "*" * len(card_number)
    return "*" * (len(card_number) - visible) + card_number[-visible:]
