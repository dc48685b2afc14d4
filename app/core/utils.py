import base64
from typing import Optional

def encode_blob(blob: Optional[bytes]) -> str:
    """
    Encode a stored binary column for a JSON response.

    :param blob: Raw bytes from the store (flag, logo), or None when the column is NULL
    :return: Base64 text, empty string for a missing or empty blob
    """
    if not blob:
        return ""
    return base64.b64encode(blob).decode("ascii")
