# users/utils.py
import re
import phonenumbers
from phonenumbers import NumberParseException
from django.conf import settings

_NOISE = re.compile(r'[^\d+]')


def to_e164(phone_str, region=None):
    """
    Normalise a Bosnian or international number to E.164
    Broj telefona u E.164 formatu, npr. "061 123 456" -> "+38761123456"

    Raises ValueError("invalid_phone_format") for anything that is not a
    valid number for `region` (default: settings.DEFAULT_REGION).
    """
    digits = _NOISE.sub('', (phone_str or '').strip())
    if digits.startswith('00'):
        digits = '+' + digits[2:]
    if not digits:
        raise ValueError("invalid_phone_format")

    region = region or getattr(settings, 'DEFAULT_REGION', 'BA')
    try:
        number = phonenumbers.parse(digits, None if digits.startswith('+') else region)
    except NumberParseException:
        raise ValueError("invalid_phone_format")

    if not phonenumbers.is_valid_number(number):
        raise ValueError("invalid_phone_format")

    return phonenumbers.format_number(number, phonenumbers.PhoneNumberFormat.E164)


def is_valid_phone(phone_str, region=None):
    try:
        to_e164(phone_str, region)
    except ValueError:
        return False
    return True
