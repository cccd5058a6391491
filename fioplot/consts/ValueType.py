from enum import Enum


class ValueType(Enum):
    BW = "bw"
    IOPS = "iops"

    @classmethod
    def from_selector(cls, selector: str) -> "ValueType":
        # Anything other than "iops" plots bandwidth.
        if selector == cls.IOPS.value:
            return cls.IOPS
        return cls.BW
