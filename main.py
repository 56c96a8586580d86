import sys
import datetime
import logging
from openpyxl import Workbook
from openpyxl.styles import Font, PatternFill
from core.components import Circuit
from core.converters import format_power, parse_ratings
from core.errors import CalculationError
from core.models import DEFAULT_VOLTAGE, MCBStandard
from standards.iec import MCB_RATING_PRESETS, MCB_STANDARDS_INFO, parse_standard

logger = logging.getLogger(__name__)

def get_standard():
    print("\n--- MCB Standard ---")
    standards = list(MCBStandard)
    for idx, standard in enumerate(standards, start=1):
        info = MCB_STANDARDS_INFO[standard]
        print(f"({idx}) {info.label} - {info.description}")

    choice = input("Select standard [1]: ").strip()
    if choice.isdigit() and 1 <= int(choice) <= len(standards):
        return standards[int(choice) - 1]
    if not choice:
        return MCBStandard.RESIDENTIAL_COMMERCIAL
    return parse_standard(choice)

def get_breaker_current(standard):
    """Returns (amps, is_custom). Custom sizes get a standard suggestion."""
    ratings = MCB_RATING_PRESETS[standard]
    print("Standard sizes: " + ", ".join(f"{r:g}A" for r in ratings))
    raw = input("MCB size (A), or 'c' for a custom size: ").strip().lower()
    if raw in ("c", "custom"):
        return float(input("Custom MCB size (A): ")), True
    amps = float(raw.rstrip("a"))
    return amps, amps not in ratings

def get_custom_ratings():
    raw = input("Custom MCB ratings for suggestions (e.g. 6, 10, 20) [standard table]: ").strip()
    return parse_ratings(raw) if raw else None

def get_calculations_input(standard, custom_ratings=None):
    calculations = []
    print("\n--- Breakers ---")

    while True:
        print(f"\n[Breaker #{len(calculations)+1}]")
        name = input("Circuit name: ").strip()
        if not name: break

        try:
            voltage = float(input(f"Voltage (V) [{DEFAULT_VOLTAGE:g}]: ") or DEFAULT_VOLTAGE)
            amps, is_custom = get_breaker_current(standard)
            pf = float(input("Power factor [1.0]: ") or 1.0)
            is_three_phase = input("3-phase system? (y/n) [n]: ").lower() == 'y'

            circuit = Circuit(
                name=name, voltage=voltage, breaker_current=amps, power_factor=pf,
                is_three_phase=is_three_phase, standard=standard, custom_ratings=custom_ratings,
            )
            result = circuit.calculate(suggest=is_custom)
            calculations.append({"circuit": circuit, "result": result})

            kind, text = result.message
            if kind == "error":
                logger.warning("%s: %s", name, text)
            print(f"[{kind.upper()}] {text}")

        except ValueError as e:
            # CalculationError is a ValueError too
            print(f"Input error: {e}. Try again.")
            logger.debug("Rejected input for %s: %s", name, e)

        more = input("Add another breaker? (y/n): ").lower()
        if more != 'y':
            break

    return calculations

def export_to_excel(calculations, standard, filename=None):
    wb = Workbook()

    # --- Sheet 1: Circuits ---
    ws1 = wb.active
    ws1.title = "Circuits"

    headers = ["Circuit", "Voltage (V)", "MCB (A)", "PF", "System", "Power (W)", "Power", "Suggested MCB (A)", "Notes"]
    ws1.append(headers)

    header_fill = PatternFill(start_color="DDDDDD", end_color="DDDDDD", fill_type="solid")
    header_font = Font(bold=True)
    for cell in ws1[1]:
        cell.font = header_font
        cell.fill = header_fill

    for item in calculations:
        circuit = item["circuit"]
        res = item["result"]
        ws1.append([
            circuit.name,
            circuit.voltage, circuit.breaker_current, circuit.power_factor,
            "3-Phase" if res.is_three_phase else "Single-Phase",
            round(res.power_watts, 2),
            format_power(res.power_watts),
            res.suggested_rating,
            res.message[1],
        ])

    for col in ws1.columns:
        ws1.column_dimensions[col[0].column_letter].width = 18

    # --- One sheet per rating table ---
    for std, ratings in MCB_RATING_PRESETS.items():
        ws = wb.create_sheet(std.value)
        ws.append([MCB_STANDARDS_INFO[std].label])
        ws.append([MCB_STANDARDS_INFO[std].description])
        ws.append(["Rating (A)"])
        for rating in ratings:
            ws.append([rating])
        if std == standard:
            ws.sheet_properties.tabColor = "7E22CE"

    if filename is None:
        filename = f"Reporte_MCB_{datetime.datetime.now().strftime('%Y%m%d_%H%M%S')}.xlsx"
    wb.save(filename)
    logger.info("Excel report written to %s", filename)
    return filename

def main():
    logging.basicConfig(level=logging.INFO)
    print("==========================================================")
    print(" MCB POWER CALCULATOR")
    print("==========================================================")

    try:
        standard = get_standard()
        custom_ratings = get_custom_ratings()
    except CalculationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    calculations = get_calculations_input(standard, custom_ratings)

    if not calculations:
        print("No breakers entered.")
        sys.exit()

    print("-" * 100)
    print(f"{'Circuit':<15} | {'V':<7} | {'MCB':<7} | {'PF':<5} | {'System':<12} | {'Power':<14} | {'Suggested'}")
    print("-" * 100)
    for item in calculations:
        circuit, res = item["circuit"], item["result"]
        system = "3-Phase" if res.is_three_phase else "Single-Phase"
        breaker = circuit.breaker_for(res)
        suggested = f"{breaker.poles}P {breaker.rated_current:g}A" if breaker else "-"
        print(f"{circuit.name:<15} | {circuit.voltage:<7g} | {circuit.breaker_current:<7g} | {circuit.power_factor:<5g} | {system:<12} | {format_power(res.power_watts):<14} | {suggested}")
    print("-" * 100)

    ask = input("\nExport report to Excel? (y/n): ").lower()
    if ask == 'y':
        filename = export_to_excel(calculations, standard)
        print(f"\n[INFO] Excel generated: {filename}")

if __name__ == "__main__":
    main()
