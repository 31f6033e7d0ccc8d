from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
    ]

    operations = [
        migrations.CreateModel(
            name='Employee',
            fields=[
                ('id', models.AutoField(primary_key=True, serialize=False)),
                ('name', models.CharField(db_column='employee_name', max_length=255)),
                ('salary', models.BigIntegerField(db_column='employee_salary')),
                ('department', models.CharField(max_length=255)),
            ],
            options={
                'verbose_name': 'Employee',
                'verbose_name_plural': 'Employees',
                'db_table': 'employee',
                'indexes': [models.Index(fields=['department'], name='employee_department_idx')],
            },
        ),
    ]
