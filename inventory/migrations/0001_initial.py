import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models

import inventory.categories


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="Child",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150)),
                ("birth_date", models.DateField(blank=True, null=True)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "owner",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="children",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "db_table": "children",
                "ordering": ["name"],
                "verbose_name_plural": "Children",
            },
        ),
        migrations.CreateModel(
            name="SizeOption",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("label", models.CharField(max_length=100, unique=True)),
                ("description", models.CharField(blank=True, max_length=255)),
                ("order", models.PositiveIntegerField(db_index=True, default=0)),
                ("is_active", models.BooleanField(db_index=True, default=True)),
            ],
            options={
                "db_table": "size_options",
                "ordering": ["order", "label"],
            },
        ),
        migrations.CreateModel(
            name="ClothingItem",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                (
                    "category",
                    models.CharField(choices=inventory.categories.CATEGORY_CHOICES, db_index=True, max_length=30),
                ),
                (
                    "subcategory",
                    models.CharField(
                        blank=True, choices=inventory.categories.SUBCATEGORY_CHOICES, max_length=40, null=True
                    ),
                ),
                ("size", models.CharField(blank=True, max_length=100, null=True)),
                ("colors", models.TextField(blank=True, null=True)),
                (
                    "status",
                    models.CharField(
                        choices=inventory.categories.STATUS_CHOICES, db_index=True, default="IN_USE", max_length=20
                    ),
                ),
                (
                    "disposition",
                    models.CharField(
                        choices=inventory.categories.DISPOSITION_CHOICES, db_index=True, default="KEEP", max_length=20
                    ),
                ),
                ("is_set", models.BooleanField(default=False)),
                ("needs_classification", models.BooleanField(default=False)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
                (
                    "child",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="clothing_items",
                        to="inventory.child",
                    ),
                ),
                (
                    "set_item",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="set_members",
                        to="inventory.clothingitem",
                    ),
                ),
                (
                    "size_option",
                    models.ForeignKey(
                        blank=True,
                        null=True,
                        on_delete=django.db.models.deletion.SET_NULL,
                        related_name="clothing_items",
                        to="inventory.sizeoption",
                    ),
                ),
            ],
            options={
                "db_table": "clothing_items",
                "ordering": ["-created_at"],
                "indexes": [models.Index(fields=["child", "category"], name="clothing_item_child_cat_idx")],
            },
        ),
    ]
