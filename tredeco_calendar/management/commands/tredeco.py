"""Convert dates between the standard and Tredeco calendars."""

import json

from django.core.management.base import BaseCommand, CommandError

from tredeco_calendar import core
from tredeco_calendar.forms import StandardToTredecoForm, TredecoToStandardForm, TredecoYearForm
from tredeco_calendar.utils import format_tredeco_date, to_storage


def _form_error(form) -> CommandError:
    messages = [f"{field}: {msg}" for field, errs in form.errors.items() for msg in errs]
    return CommandError("; ".join(messages))


class Command(BaseCommand):
    help = "Convert dates to/from the Tredeco calendar and show year metadata"

    def add_arguments(self, parser):
        sub = parser.add_subparsers(dest="action", required=True)

        to_tredeco = sub.add_parser("to-tredeco", help="standard date -> Tredeco date")
        to_tredeco.add_argument("date", help="DD-MM-YYYY or YYYY-MM-DD")

        to_standard = sub.add_parser("to-standard", help="Tredeco date -> standard date")
        to_standard.add_argument("year", help="Tredeco year, or a whole date such as 'Nilo 2023'")
        to_standard.add_argument(
            "month", nargs="?", default="", help="0-14 or month name (Nilo, Bix included)"
        )
        to_standard.add_argument("day", nargs="?", default="")

        meta = sub.add_parser("meta", help="Tredeco year metadata")
        meta.add_argument("year")
        meta.add_argument("--json", action="store_true", dest="as_json")

    def handle(self, *args, **options):
        action = options["action"]
        if action == "to-tredeco":
            self._to_tredeco(options["date"])
        elif action == "to-standard":
            self._to_standard(options["year"], options["month"], options["day"])
        else:
            self._meta(options["year"], options["as_json"])

    def _to_tredeco(self, value: str) -> None:
        form = StandardToTredecoForm({"date": value})
        if not form.is_valid():
            raise _form_error(form)
        tdate = form.cleaned_data["result"]
        self.stdout.write(f"{to_storage(tdate)}\t{format_tredeco_date(tdate)}")

    def _to_standard(self, year: str, month: str, day: str) -> None:
        data = {"year": year, "month": month, "day": day} if month else {"date": year}
        form = TredecoToStandardForm(data)
        if not form.is_valid():
            raise _form_error(form)
        self.stdout.write(form.cleaned_data["result"].isoformat())

    def _meta(self, year: str, as_json: bool) -> None:
        form = TredecoYearForm({"year": year})
        if not form.is_valid():
            raise _form_error(form)
        meta = core.year_meta(form.cleaned_data["year"])
        if as_json:
            self.stdout.write(json.dumps(meta, indent=2))
            return
        self.stdout.write(f"Tredeco year {meta['year']}: {meta['first_day']} .. {meta['last_day']}")
        self.stdout.write(f"Days: {meta['year_length']} ({'leap' if meta['leap'] else 'common'})")
        self.stdout.write("Week: " + " ".join(meta["weekday_headers"]))
        self.stdout.write(f"Nilo: {meta['nilo']}")
        if meta["bix"]:
            self.stdout.write(f"Bix: {meta['bix']}")
