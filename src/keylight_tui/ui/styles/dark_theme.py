MAGENTA = "#ff77ff"
PANEL_BACKGROUND = "#1a1a1a"
GAUGE_TRACK = "#2a2a2a"
INACTIVE = "#555555"
BRIGHTNESS_ON = "#e6e6e6"


def get_style() -> str:
    return f"""
    Screen {{
        background: {PANEL_BACKGROUND};
        color: #e6e6e6;
    }}

    KeyLightPanel {{
        height: 1fr;
        border: round #3a3a3a;
        border-title-color: {MAGENTA};
        border-title-style: bold;
        border-title-align: center;
        padding: 0 1;
    }}

    KeyLightPanel .gauge-caption {{
        height: 1;
        color: #888888;
    }}

    Gauge {{
        height: 1fr;
        background: {PANEL_BACKGROUND};
    }}

    Footer {{
        background: #2a2a2a;
    }}
    """
