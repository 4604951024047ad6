"""
Shared schema types.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

# Money is kept as Decimal in Python and rendered as a JSON number.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
