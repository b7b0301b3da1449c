# src/breeze_balance/models.py
from dataclasses import dataclass
from enum import Enum
from typing import Dict, NamedTuple


class YesNo(str, Enum):
    YES = "Yes"
    NO = "No"


class StoredValueFragments(NamedTuple):
    """The two raw pieces that make up CardBalanceRecord.stored_value."""

    label: str
    value: str

    def joined(self) -> str:
        return self.label + self.value


@dataclass(frozen=True)
class CardBalanceRecord:
    """Card attributes read from one balance page.

    Every field is always set; text fields are "" when the page lacks them.
    """

    balance_protected: YesNo = YesNo.YES
    hotlisted_status: YesNo = YesNo.YES
    card_expiration_date: str = ""
    product_name: str = ""
    product_expire_date: str = ""
    remaining_rides: str = ""
    stored_value: str = ""

    def to_dict(self) -> Dict[str, str]:
        """JSON body shape returned by the balance HTTP route."""
        return {
            "balanceProtected": self.balance_protected.value,
            "hotlistedStatus": self.hotlisted_status.value,
            "cardExpirationDate": self.card_expiration_date,
            "productName": self.product_name,
            "productExpireDate": self.product_expire_date,
            "remainingRides": self.remaining_rides,
            "storedValue": self.stored_value,
        }
