# profiles/wizard.py
"""
Onboarding wizard state machine.

A profile moves through steps 1..9; `registration_step` is the highest step
submitted so far. A step may be (re)submitted only when every step before it
has been submitted once, and finishing the last step makes the profile
eligible for public listings.
"""
import logging

from django.db import transaction
from rest_framework import status

from .serializers import (
    PersonalDataStepSerializer,
    BusinessDataStepSerializer,
    ServicesStepSerializer,
    WorkingHoursStepSerializer,
    WorkOptionsStepSerializer,
    ReferencesStepSerializer,
    LicenseStepSerializer,
    ContactMediaStepSerializer,
    DescriptionsStepSerializer,
)
from .services import refresh_slug

logger = logging.getLogger('onboarding')

STEP_SERIALIZERS = {
    1: PersonalDataStepSerializer,
    2: BusinessDataStepSerializer,
    3: ServicesStepSerializer,
    4: WorkingHoursStepSerializer,
    5: WorkOptionsStepSerializer,
    6: ReferencesStepSerializer,
    7: LicenseStepSerializer,
    8: ContactMediaStepSerializer,
    9: DescriptionsStepSerializer,
}
FINAL_STEP = max(STEP_SERIALIZERS)

# steps that change what display_name returns
NAME_STEPS = {1, 2}


class WizardError(Exception):
    def __init__(self, code, detail, status_code=status.HTTP_400_BAD_REQUEST):
        super().__init__(detail)
        self.code = code
        self.detail = detail
        self.status_code = status_code


def check_step_allowed(profile, step):
    if step not in STEP_SERIALIZERS:
        raise WizardError('not_found', f"Unknown step {step}", status.HTTP_404_NOT_FOUND)

    if step > profile.registration_step + 1:
        raise WizardError(
            'step_not_allowed',
            f"Complete step {profile.registration_step + 1} first"
        )


def missing_requirements(profile):
    """Data a profile needs before it may be listed publicly"""
    missing = []
    if not profile.display_name:
        missing.append('name')
    if profile.business_city_id is None:
        missing.append('business_city')
    if not profile.profile_services.exists():
        missing.append('services')
    return missing


def submit_step(profile, step, data):
    """
    Validate and store one wizard step. Raises WizardError for state
    violations and serializers.ValidationError for bad payloads.
    """
    check_step_allowed(profile, step)

    serializer = STEP_SERIALIZERS[step](profile, data=data)
    serializer.is_valid(raise_exception=True)

    if step == FINAL_STEP:
        missing = missing_requirements(profile)
        if missing:
            raise WizardError('incomplete_steps', {'missing': missing})

    with transaction.atomic():
        serializer.save()

        update_fields = ['registration_step', 'updated_at']
        profile.registration_step = max(profile.registration_step, step)

        if step == FINAL_STEP and not profile.registration_completed:
            profile.registration_completed = True
            update_fields.append('registration_completed')
            logger.info("Profile %s completed registration", profile.pk)

        if step == FINAL_STEP or (profile.registration_completed and step in NAME_STEPS):
            refresh_slug(profile)
            update_fields.append('slug')

        profile.save(update_fields=update_fields)

    logger.info("Profile %s submitted step %s", profile.pk, step)
    return profile
