"""Field rules for security.txt; importing this package registers them."""

from .listed import AcknowledgmentsField, CanonicalField, ContactField
from .scalar import EncryptionField, HiringField, PolicyField
from .expires import ExpiresField, parse_rfc3339
from .languages import PreferredLanguagesField
