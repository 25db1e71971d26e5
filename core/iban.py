"""
Belgian IBAN validation (ISO 7064 MOD 97-10)
"""

import re

_BELGIAN_IBAN = re.compile(r"^BE\d{14}$")


def is_valid_belgian_iban(iban_raw) -> bool:
    """
    Check a Belgian account number.

    Whitespace is ignored and letters may be lowercase. The remainder is
    computed in 7-digit blocks, each block prefixed with the decimal
    remainder of the previous one.
    """
    if not iban_raw or not isinstance(iban_raw, str):
        return False

    iban = re.sub(r"\s+", "", iban_raw).upper()
    if not _BELGIAN_IBAN.match(iban):
        return False

    rearranged = iban[4:] + iban[:4]

    # A=10 ... Z=35
    numeric = "".join(
        str(ord(ch) - 55) if "A" <= ch <= "Z" else ch
        for ch in rearranged
    )

    remainder = 0
    for i in range(0, len(numeric), 7):
        block = f"{remainder}{numeric[i:i + 7]}"
        remainder = int(block) % 97

    return remainder == 1
