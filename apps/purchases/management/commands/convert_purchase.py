from uuid import UUID

from django.core.management.base import BaseCommand, CommandError

from apps.purchases.application.dto import ConversionRequestDTO
from apps.purchases.application.handlers import convert_purchase
from apps.purchases.domain.outcomes import Converted, InvalidArgument, NotFound, RateUnavailable


class Command(BaseCommand):
    help = 'Convert a stored purchase transaction to the currency of a country'

    def add_arguments(self, parser):
        parser.add_argument(
            'transaction_id',
            type=str,
            help='Id of the stored purchase transaction'
        )
        parser.add_argument(
            '--country',
            type=str,
            required=True,
            help='Country name as published by the Treasury (e.g. Brazil)'
        )
        parser.add_argument(
            '--currency',
            type=str,
            required=True,
            help='Currency name as published by the Treasury (e.g. Real)'
        )

    def handle(self, **options):
        try:
            transaction_id = UUID(options['transaction_id'])
        except ValueError:
            raise CommandError('Invalid transaction id. Use a UUID')

        outcome = convert_purchase(
            ConversionRequestDTO(
                transaction_id=transaction_id,
                country=options['country'],
                currency=options['currency'],
            )
        )

        if isinstance(outcome, InvalidArgument):
            raise CommandError(outcome.message)
        if isinstance(outcome, NotFound):
            raise CommandError(f'Transaction with Id {outcome.transaction_id} was not found.')
        if isinstance(outcome, RateUnavailable):
            raise CommandError(outcome.message)

        if not isinstance(outcome, Converted):
            raise CommandError(f'Unexpected conversion outcome: {outcome!r}')

        result = outcome.result
        self.stdout.write(
            self.style.SUCCESS(
                f'{result.description} ({result.transaction_date}): '
                f'{result.amount} USD = {result.converted_amount} {result.currency}'
            )
        )
        self.stdout.write(
            f'Rate {result.exchange_rate} for {result.country}/{result.currency} '
            f'recorded on {result.record_date}'
        )
