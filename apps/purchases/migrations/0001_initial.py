import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='PurchaseTransactionRecord',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('updated_at', models.DateTimeField(auto_now=True)),
                ('description', models.CharField(max_length=50)),
                ('transaction_date', models.DateField(db_index=True)),
                ('amount_usd', models.DecimalField(decimal_places=2, max_digits=18)),
            ],
            options={
                'db_table': 'purchases_purchase_transaction',
                'ordering': ['-transaction_date', '-created_at'],
            },
        ),
    ]
