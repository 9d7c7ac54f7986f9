# services/management/commands/init_services_data.py
from django.core.management.base import BaseCommand
from django.db import transaction
from services.models import ServiceCategory

# Main category -> subcategories
CATEGORIES = [
    ('Računovodstvo', [
        'Vođenje poslovnih knjiga',
        'Obračun plata',
        'Godišnji obračun i završni račun',
        'Knjigovodstvo za obrtnike',
    ]),
    ('Porezno savjetovanje', [
        'PDV prijave',
        'Porez na dobit',
        'Porez na dohodak',
        'Porezno planiranje',
    ]),
    ('Revizija', [
        'Eksterna revizija',
        'Interna revizija',
        'Revizija projekata',
    ]),
    ('Finansijsko savjetovanje', [
        'Poslovni planovi',
        'Finansijska analiza',
        'Kreditni zahtjevi',
    ]),
    ('Osnivanje firmi', [
        'Registracija d.o.o.',
        'Registracija obrta',
        'Likvidacija firmi',
    ]),
    ('Obuke i edukacije', [
        'Obuke za knjigovođe',
        'Seminari iz poreza',
    ]),
]


class Command(BaseCommand):
    help = 'Initialize the service category taxonomy'

    def handle(self, *args, **options):
        self.stdout.write('Creating service categories...')
        with transaction.atomic():
            created = self.create_categories()

        self.stdout.write(self.style.SUCCESS(
            f'Successfully initialized services data! ({created} new categories)'
        ))

    def create_categories(self):
        created_count = 0
        for i, (main_name, subcategories) in enumerate(CATEGORIES):
            main, created = ServiceCategory.objects.get_or_create(
                name=main_name,
                parent=None,
                defaults={'order': i + 1, 'is_active': True}
            )
            created_count += int(created)

            for j, sub_name in enumerate(subcategories):
                _, created = ServiceCategory.objects.get_or_create(
                    name=sub_name,
                    parent=main,
                    defaults={'order': j + 1, 'is_active': True}
                )
                created_count += int(created)

        self.stdout.write(f'  categories: {ServiceCategory.objects.count()} total')
        return created_count
