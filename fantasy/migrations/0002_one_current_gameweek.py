from django.db import migrations, models


class Migration(migrations.Migration):

    dependencies = [
        ("fantasy", "0001_initial"),
    ]

    operations = [
        migrations.AddConstraint(
            model_name="gameweek",
            constraint=models.UniqueConstraint(
                condition=models.Q(("is_current", True)),
                fields=("is_current",),
                name="fantasy_one_current_gameweek",
            ),
        ),
    ]
