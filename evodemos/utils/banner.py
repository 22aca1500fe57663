"""Copyright and license notice printed by every example program."""

BANNER_LINES = (
    "Example program for the evodemos genetic algorithm examples.",
    "Copyright (C) 2020-2023  The evodemos authors",
    "This program comes with ABSOLUTELY NO WARRANTY.  This is free",
    "software, and you are welcome to redistribute it under certain",
    "conditions.  See the GNU General Public License for more",
    "details: https://www.gnu.org/licenses/gpl-3.0.html",
)


def print_copyright_and_license() -> None:
    for line in BANNER_LINES:
        print(line)
    print()


__all__ = ["BANNER_LINES", "print_copyright_and_license"]
