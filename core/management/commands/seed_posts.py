"""Load the sample indicators into an empty store."""

from __future__ import annotations

from django.core.management.base import BaseCommand, CommandError

from core.samples import seed_sample_posts


class Command(BaseCommand):
    """Seed the sample indicators (idempotent)."""

    help = "Load the sample indicators when the store is empty (idempotent)."

    def add_arguments(self, parser) -> None:
        """Add command arguments."""

        parser.add_argument(
            "--force",
            action="store_true",
            help="Seed even when posts already exist (sample ids are never overwritten).",
        )

    def handle(self, *args, **options) -> str | None:
        """Run the command."""

        force: bool = options["force"]
        try:
            result = seed_sample_posts(force=force)
        except Exception as exc:  # noqa: BLE001 - user-visible error wrapper
            raise CommandError(f"Seeding failed: {exc}") from exc

        if not result.seeded:
            self.stdout.write("No sample indicators created (store already populated).")
            return None
        self.stdout.write(self.style.SUCCESS(f"Created {result.created} sample indicator(s)."))
        return None
