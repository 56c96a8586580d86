import streamlit as st
import pandas as pd
import io
import logging
from core.calculator import calculate
from core.converters import format_power, parse_ratings
from core.errors import InvalidInputError
from core.models import CalculationInputs, DEFAULT_VOLTAGE, MCBStandard
from core.components import circuit_from_row
from standards.iec import MCB_RATING_PRESETS, MCB_STANDARDS_INFO

logger = logging.getLogger(__name__)

# --- Page Config ---
st.set_page_config(
    page_title="MCB Power Calculator",
    page_icon="⚡",
    layout="centered",
    initial_sidebar_state="expanded"
)

# --- Custom CSS ---
st.markdown("""
<style>
    .main-header { font-family: 'Inter', sans-serif; color: #7E22CE; font-weight: 700; letter-spacing: 0.1em; }
    .console { font-family: monospace; font-size: 0.9rem; }
</style>
""", unsafe_allow_html=True)

# --- Session State Init ---
INPUT_COLUMNS = ["Circuit", "Voltage", "MCB", "FP", "ThreePhase", "Standard", "CustomRatings"]
RESULT_COLUMNS = ["Power (W)", "Power", "Suggested MCB", "Notes"]

if 'circuits_df' not in st.session_state:
    st.session_state.circuits_df = pd.DataFrame(columns=INPUT_COLUMNS)

if "standard_input" not in st.session_state:
    st.session_state.standard_input = MCBStandard.RESIDENTIAL_COMMERCIAL.value

def on_standard_change():
    # Reset the selected size when changing standards
    st.session_state.mcb_choice = ""

# --- Helper: Calculate Row ---
def calculate_row_results(row):
    try:
        # Only non-standard breakers get a suggestion, from the row's own table
        res = circuit_from_row(row).calculate()

        return pd.Series({
            "Power (W)": round(res.power_watts, 2),
            "Power": format_power(res.power_watts),
            "Suggested MCB": res.suggested_rating,
            "Notes": res.message[1],
        })
    except (ValueError, TypeError) as e:
        return pd.Series({"Notes": f"Error: {e}"})

# --- Helper: Export Excel ---
def to_excel(df):
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine='openpyxl') as writer:
        df.to_excel(writer, index=False, sheet_name='Circuits')

        for std, ratings in MCB_RATING_PRESETS.items():
            pd.DataFrame({"Rating (A)": list(ratings)}).to_excel(writer, index=False, sheet_name=std.value)

    return output.getvalue()

def show_console(message):
    if not message:
        return
    kind, text = message
    if kind == "info":
        st.success(text, icon="✅")
    else:
        st.error(text, icon="⚠️")

# --- Sidebar ---
with st.sidebar:
    st.title("MCB Standards")
    for std in MCBStandard:
        info = MCB_STANDARDS_INFO[std]
        st.markdown(f"**{info.label}**")
        st.caption(info.description)
        st.dataframe(pd.DataFrame({"A": list(MCB_RATING_PRESETS[std])}).T, hide_index=True)

# --- Main Area ---
st.markdown("<h1 class='main-header'>⚡ MCB Power Calculator</h1>", unsafe_allow_html=True)
st.markdown("---")

voltage = st.number_input("Voltage (V)", min_value=0.0, value=DEFAULT_VOLTAGE, step=10.0)

standard = MCBStandard(st.selectbox(
    "MCB Standard",
    [s.value for s in MCBStandard],
    format_func=lambda v: MCB_STANDARDS_INFO[MCBStandard(v)].label,
    key="standard_input",
    on_change=on_standard_change,
    help="Different MCB standards have different rating ranges and applications."
))
st.caption(MCB_STANDARDS_INFO[standard].description)

size_options = ["", "custom"] + [f"{r:g}" for r in MCB_RATING_PRESETS[standard]]
mcb_choice = st.selectbox(
    "Standard MCB Size (A)",
    size_options,
    format_func=lambda v: {"": "Select a standard MCB size", "custom": "Custom"}.get(v, f"{v}A"),
    key="mcb_choice",
)
is_standard_size = mcb_choice not in ("", "custom")
if is_standard_size:
    st.caption(f"Using standard {mcb_choice}A MCB for calculation")

custom_size = st.number_input(
    "Custom MCB Size (A)", min_value=0.0, value=0.0, step=1.0, disabled=is_standard_size
)
custom_ratings_text = st.text_input(
    "Custom MCB Ratings (A)",
    placeholder="e.g. 6, 10, 20 (blank uses the standard table)",
    disabled=is_standard_size,
    help="Ratings used for the suggestion instead of the selected standard's table.",
)

pf = st.slider("Power Factor (cos φ)", 0.0, 1.0, 1.0, 0.01)
is_three_phase = st.checkbox(
    "Use 3-Phase System",
    help="3-Phase uses the formula: P = √3 × V × I × PF. Single-phase uses: P = V × I × PF"
)

if st.button("Calculate Power", type="primary", use_container_width=True):
    amps = float(mcb_choice) if is_standard_size else custom_size
    result = None

    if voltage <= 0 or amps <= 0:
        message = ("error", "Voltage and MCB size must be positive numbers")
    else:
        try:
            custom_ratings = parse_ratings(custom_ratings_text) or None
            result = calculate(
                CalculationInputs(voltage=voltage, current=amps, power_factor=pf),
                standard, is_three_phase, suggest=not is_standard_size,
                custom_ratings=custom_ratings,
            )
            message = result.message
        except InvalidInputError as e:
            message = ("error", str(e))
            logger.info("Rejected input: %s", e)

    if result is not None:
        with st.container(border=True):
            st.subheader("Result")
            st.metric("Power", f"{result.power_watts:.2f} Watts", format_power(result.power_watts, use_long_form=True), delta_color="off")
            st.write(f"Using {amps:g}A MCB")
            st.write(f"Standard: {MCB_STANDARDS_INFO[standard].label}")
            st.write(f"System: {'3-Phase' if is_three_phase else 'Single-Phase'}")
            if not is_standard_size and result.suggested_rating is not None:
                st.write(f"Suggested Standard MCB Size: {result.suggested_rating:g}A")

        new_row = {
            "Circuit": f"Circuit {len(st.session_state.circuits_df) + 1}",
            "Voltage": voltage, "MCB": amps, "FP": pf,
            "ThreePhase": is_three_phase, "Standard": standard.value,
            "CustomRatings": custom_ratings_text.strip() if custom_ratings else "",
        }
        st.session_state.circuits_df = pd.concat(
            [st.session_state.circuits_df, pd.DataFrame([new_row])], ignore_index=True
        )

    show_console(message)

# --- Circuit Table ---
st.markdown("### 📋 Circuits (Editable)")

if st.button("🗑️ Clear Table", type="secondary"):
    st.session_state.circuits_df = pd.DataFrame(columns=INPUT_COLUMNS)
    st.rerun()

df_to_show = st.session_state.circuits_df.copy()

if not df_to_show.empty:
    results = df_to_show.apply(calculate_row_results, axis=1)
    df_full = pd.concat([df_to_show, results], axis=1)
else:
    df_full = pd.concat([df_to_show, pd.DataFrame(columns=RESULT_COLUMNS)], axis=1)

column_config = {
    "Voltage": st.column_config.NumberColumn(min_value=0, step=10),
    "MCB": st.column_config.NumberColumn(min_value=0, step=1),
    "FP": st.column_config.NumberColumn(min_value=0.01, max_value=1.0, step=0.01),
    "ThreePhase": st.column_config.CheckboxColumn(),
    "Standard": st.column_config.SelectboxColumn(options=[s.value for s in MCBStandard]),
    "CustomRatings": st.column_config.TextColumn("Custom Ratings (A)"),
}

edited_df = st.data_editor(
    df_full,
    key="editor",
    use_container_width=True,
    num_rows="dynamic",
    column_config=column_config,
    disabled=RESULT_COLUMNS,
)

# Recalculate when inputs change
edited_inputs = edited_df[INPUT_COLUMNS]
if not edited_inputs.equals(st.session_state.circuits_df):
    st.session_state.circuits_df = edited_inputs
    st.rerun()

if not df_full.empty:
    valid = df_full["Power (W)"].dropna() if "Power (W)" in df_full.columns else []
    if len(valid):
        st.metric("Total Power", format_power(float(sum(valid))))

    st.download_button(
        "📥 Download Results (Excel)",
        data=to_excel(df_full),
        file_name="mcb_calculator.xlsx",
        mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    )
