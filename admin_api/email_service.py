# admin_api/email_service.py
import logging
from smtplib import SMTPException

from django.conf import settings
from django.core.mail import send_mail

logger = logging.getLogger('notifications')

LICENSE_VERIFIED = 'license_verified'
PROFILE_APPROVED = 'profile_approved'

SUBJECTS = {
    LICENSE_VERIFIED: 'Vaša licenca je verifikovana',
    PROFILE_APPROVED: 'Vaš profil je odobren',
}

MESSAGES = {
    LICENSE_VERIFIED: """
Čestitamo, {name}!

Vaša licenca je uspješno verifikovana od strane administratora.

Vaš profil sada prikazuje verifikaciju licence, što pomaže klijentima da vas
lakše prepoznaju kao provjerenog profesionalca.

{profile_url}

Srdačan pozdrav,
Vaš Tim
""",
    PROFILE_APPROVED: """
Dobrodošli, {name}!

Vaš profil je uspješno odobren od strane administratora i sada je javno vidljiv.

Klijenti mogu vidjeti vaš profil i kontaktirati vas preko platforme:
{profile_url}

Srdačan pozdrav,
Vaš Tim
""",
}


def _recipient(profile):
    return profile.user.email or profile.email


def send_profile_notification(profile, notification_type):
    """
    E-mail the profile owner; returns True when the mail went out.
    Failures are logged and never raised.
    """
    if notification_type not in SUBJECTS:
        raise ValueError(f"Unknown notification type: {notification_type}")

    recipient = _recipient(profile)
    if not recipient:
        logger.warning("No e-mail address for profile %s, %s not sent", profile.pk, notification_type)
        return False

    message = MESSAGES[notification_type].format(
        name=profile.display_name or recipient,
        profile_url=f"{settings.SITE_URL.rstrip('/')}/profil/{profile.slug}",
    )

    try:
        send_mail(
            subject=SUBJECTS[notification_type],
            message=message,
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[recipient],
            fail_silently=False,
        )
    except (SMTPException, OSError) as e:
        logger.error("Sending %s to %s failed: %s", notification_type, recipient, e)
        return False

    logger.info("Sent %s to %s", notification_type, recipient)
    return True
