"""
Management command to test Shwary payment functionality.
"""

from django.core.management.base import BaseCommand, CommandError

from shwary.client import ShwaryClient
from shwary.constants import Country
from shwary.dtos import PaymentRequest
from shwary.exceptions import ShwaryException
from shwary.utils.formatters import format_currency


class Command(BaseCommand):
    help = 'Test Shwary payment functionality'

    def add_arguments(self, parser):
        parser.add_argument(
            '--phone',
            type=str,
            required=True,
            help='Customer phone number (e.g., +243812345678)'
        )
        parser.add_argument(
            '--amount',
            type=int,
            required=True,
            help='Payment amount in the smallest currency unit'
        )
        parser.add_argument(
            '--country',
            type=str,
            default=Country.DRC.value,
            choices=[c.value for c in Country],
            help='Country code (default: DRC)'
        )
        parser.add_argument(
            '--callback-url',
            type=str,
            help='HTTPS URL the gateway should notify'
        )
        parser.add_argument(
            '--sandbox',
            action='store_true',
            help='Use the sandbox endpoint regardless of SHWARY_SANDBOX'
        )

    def handle(self, *args, **options):
        country = Country.resolve(options['country'])

        self.stdout.write(self.style.SUCCESS('\n=== Shwary Payment Test ===\n'))

        try:
            request = PaymentRequest.create(
                amount=options['amount'],
                phone=options['phone'],
                country=country,
                callback_url=options.get('callback_url'),
            )

            self.stdout.write('Creating payment...')
            self.stdout.write(f'  Country: {country.display_name}')
            self.stdout.write(f'  Phone: {request.client_phone_number}')
            self.stdout.write(f'  Amount: {format_currency(request.amount, country.currency)}\n')

            with ShwaryClient.from_django_settings() as client:
                if options['sandbox']:
                    transaction = client.create_sandbox_payment(request)
                else:
                    transaction = client.create_payment(request)

        except ShwaryException as e:
            raise CommandError(f'Payment test failed: {e.message}')

        self.stdout.write(self.style.SUCCESS('\n✓ Payment created successfully!'))
        self.stdout.write(f'  Transaction ID: {transaction.id}')
        self.stdout.write(f'  Reference: {transaction.reference_id}')
        self.stdout.write(f'  Status: {transaction.status.value}')
        self.stdout.write(f'  Amount: {format_currency(transaction.amount, transaction.currency)}')
        self.stdout.write(f"  Sandbox: {'yes' if transaction.is_sandbox else 'no'}")

        if not transaction.is_terminal():
            self.stdout.write(self.style.WARNING(
                '\nNote: Customer should confirm the payment on their phone. '
                'The final status arrives on the webhook.'
            ))
