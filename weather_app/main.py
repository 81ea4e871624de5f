import logging
import sys

from .config import LOG_FORMAT, LOG_LEVEL
from .errors import WeatherAppError
from .services import WeatherReportService


def main() -> None:
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
    report_service = WeatherReportService()

    # ------------------------------------------------------------------
    # 1️⃣ Gather the ZIP (argv first, prompt otherwise)
    # ------------------------------------------------------------------
    if len(sys.argv) > 1:
        zip_code = sys.argv[1]
    else:
        try:
            zip_code = input("Enter ZIP: ").strip()
        except (EOFError, KeyboardInterrupt):
            sys.exit("\nNo ZIP entered.")
    try:
        report = report_service.get_report(zip_code)
    except WeatherAppError as exc:
        logging.getLogger(__name__).error("Lookup failed: %s", exc)
        sys.exit(f"Error: {exc.public_message}")

    # ------------------------------------------------------------------
    # 2️⃣ Current conditions
    # ------------------------------------------------------------------
    print(f"\n{report.location} ({report.zipcode})")
    print(f"\tCurrent Temperature: {report.temperature:.1f}{report.unit}")
    print(f"\tHumidity: {report.humidity:.0f}%")
    print(f"\tSunset: {report.sunset}")

    # ------------------------------------------------------------------
    # 3️⃣ Overnight low, only while the sun is still up
    # ------------------------------------------------------------------
    if report.evening_forecast:
        print(
            f"\nEvening forecast: {report.evening_forecast.temperature:.1f}{report.unit} "
            f"around {report.evening_forecast.time}"
        )

    # ------------------------------------------------------------------
    # 4️⃣ Next few days
    # ------------------------------------------------------------------
    if report.daily_forecast:
        print("\nDaily forecast:")
    for day in report.daily_forecast:
        high = "n/a" if day.high_temp is None else f"{day.high_temp:.0f}°"
        low = "n/a" if day.low_temp is None else f"{day.low_temp:.0f}°"
        print(f"\t{day.date}: H {high}  L {low}")


if __name__ == "__main__":
    main()
