"""
package: objprint
"""

# <AUTOGEN_INIT>
from objprint import (
    base,
    printing,
    xlogging,
)


__all__ = [
    "base",
    "printing",
    "xlogging",
]
# </AUTOGEN_INIT>

__version__ = "0.1.0"
