from django.conf import settings
from django.db import migrations, models
import django.db.models.deletion


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="UserMeta",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("key", models.CharField(db_index=True, max_length=100, verbose_name="키")),
                ("value", models.JSONField(blank=True, null=True, verbose_name="값")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="수정일")),
                (
                    "user",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="meta_entries",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "user meta",
                "verbose_name_plural": "user meta",
                "ordering": ["user_id", "key"],
                "permissions": [("manage_forum_associations", "Can manage forum associations")],
            },
        ),
        migrations.AddConstraint(
            model_name="usermeta",
            constraint=models.UniqueConstraint(fields=("user", "key"), name="forum_access_usermeta_user_key"),
        ),
    ]
