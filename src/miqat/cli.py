"""Command-line interface for Miqat."""

import argparse
import sys
from datetime import date, datetime

from babel.dates import format_date

from miqat import __version__
from miqat.domain.models import AsrSchool, CalculationMethod, Language, PrayerName


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser."""
    parser = argparse.ArgumentParser(
        prog="miqat",
        description="Çevrimdışı namaz vakti ve kıble hesaplayıcı",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version=f"miqat {__version__}",
    )

    subparsers = parser.add_subparsers(dest="command", help="Komutlar")

    # serve command
    serve_parser = subparsers.add_parser("serve", help="Web sunucusunu başlat")
    serve_parser.add_argument(
        "--host",
        "-H",
        default="127.0.0.1",
        help="Sunucu adresi (varsayılan: 127.0.0.1)",
    )
    serve_parser.add_argument(
        "--port",
        "-p",
        type=int,
        default=8080,
        help="Sunucu portu (varsayılan: 8080)",
    )
    serve_parser.add_argument(
        "--log-level",
        "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Log seviyesi (varsayılan: INFO)",
    )

    # times command
    times_parser = subparsers.add_parser("times", help="Namaz vakitlerini göster")
    _add_coordinates(times_parser)
    times_parser.add_argument(
        "--date",
        type=date.fromisoformat,
        help="Başlangıç tarihi YYYY-MM-DD (varsayılan: bugün)",
    )
    times_parser.add_argument(
        "--days",
        "-d",
        type=int,
        default=1,
        help="Kaç günlük (varsayılan: 1)",
    )
    times_parser.add_argument(
        "--tz",
        type=float,
        help="UTC farkı saat olarak (varsayılan: konumdan bulunur)",
    )
    times_parser.add_argument(
        "--method",
        "-m",
        default=CalculationMethod.MWL.value,
        help="Hesaplama metodu: " + ", ".join(m.value for m in CalculationMethod),
    )
    times_parser.add_argument(
        "--school",
        "-s",
        choices=[s.value for s in AsrSchool],
        default=AsrSchool.SHAFI.value,
        help="İkindi mezhebi (varsayılan: shafi)",
    )
    times_parser.add_argument(
        "--lang",
        choices=[lang.value for lang in Language],
        default=Language.ENGLISH.value,
        help="Görüntüleme dili (varsayılan: en)",
    )
    times_parser.add_argument(
        "--tune",
        help="Dakika ayarları: Fajr,Sunrise,Dhuhr,Asr,Maghrib,Isha",
    )

    # qibla command
    qibla_parser = subparsers.add_parser("qibla", help="Kıble yönünü göster")
    _add_coordinates(qibla_parser)

    # methods command
    subparsers.add_parser("methods", help="Hesaplama metotlarını listele")

    return parser


def _add_coordinates(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--lat",
        type=float,
        required=True,
        help="Enlem",
    )
    parser.add_argument(
        "--lng",
        type=float,
        required=True,
        help="Boylam",
    )


def cmd_serve(args: argparse.Namespace) -> None:
    """Run the web server."""
    import uvicorn

    from miqat.api.app import create_app
    from miqat.config import get_config, setup_logging

    setup_logging(args.log_level)

    app = create_app(get_config())

    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def cmd_times(args: argparse.Namespace) -> None:
    """Show prayer times."""
    from miqat.domain.hijri import format_hijri
    from miqat.domain.models import Location, PrayerOffsets
    from miqat.services.prayer_service import PrayerService

    location = Location(latitude=args.lat, longitude=args.lng)
    service = PrayerService(
        location,
        method=args.method,
        asr_school=AsrSchool(args.school),
        offsets=PrayerOffsets.from_tune(args.tune) if args.tune else None,
        timezone_offset=args.tz,
    )
    language = Language(args.lang)

    start = args.date or datetime.now(service.timezone).date()
    times_list = service.calculate_range(start, args.days)

    print(f"\n📍 Konum: {args.lat:.4f}, {args.lng:.4f}")
    print(f"🌍 Timezone: {service.timezone_name}")
    print(f"🧮 Metot: {service.method.value} ({service.method.label})")
    print(f"🕒 İkindi: {service.asr_school.display_name}")
    print()

    header = "".join(f"{prayer.label(language):>9}" for prayer in PrayerName)
    print("=" * 80)
    print(f"{'Tarih':<12}{'Hicri':<22}{header}")
    print("-" * 80)

    for times in times_list:
        row = "".join(f"{prayer.time:>9}" for prayer in times.prayers)
        print(f"{times.date.strftime('%d.%m.%Y'):<12}{format_hijri(times.date, language):<22}{row}")

    print("=" * 80)

    if any(times.has_polar_events for times in times_list):
        print("⚠️  '--:--' bu enlemde/tarihte oluşmayan vakitleri gösterir.")

    if args.days == 1:
        print(format_date(start, "d MMMM yyyy, EEEE", locale=language.value))


def cmd_qibla(args: argparse.Namespace) -> None:
    """Show Qibla direction."""
    from miqat.services.calculator import compute_qibla

    qibla = compute_qibla(args.lat, args.lng)

    print(f"\n📍 Konum: {args.lat:.4f}, {args.lng:.4f}")
    print(f"🧭 Kıble: {qibla.direction:.2f}° ({qibla.compass_point})")
    print(f"📏 Kabe'ye uzaklık: {qibla.distance_km:,.1f} km")


def cmd_methods(args: argparse.Namespace) -> None:  # noqa: ARG001
    """List calculation methods."""
    print(f"{'Metot':<10}{'Sabah':>8}{'Yatsı':>12}  Açıklama")
    print("-" * 80)
    for method in CalculationMethod:
        params = method.params
        isha = (
            f"+{params.maghrib_minutes:g} dk"
            if params.uses_isha_interval
            else f"{params.isha_angle:g}°"
        )
        print(f"{method.value:<10}{params.fajr_angle:>7g}°{isha:>12}  {method.label}")


def main() -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args()

    commands = {
        "serve": cmd_serve,
        "times": cmd_times,
        "qibla": cmd_qibla,
        "methods": cmd_methods,
    }

    cmd_func = commands.get(args.command)
    if cmd_func is None:
        parser.print_help()
        return 1

    try:
        cmd_func(args)
    except ValueError as e:
        print(f"❌ Hata: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
