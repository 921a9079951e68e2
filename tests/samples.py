# Reference values shared by the conversion tests.

samples_hex_rgba = {
    "#ff0000": (255, 0, 0, 1.0),
    "#00FF00": (0, 255, 0, 1.0),
    "#abc": (170, 187, 204, 1.0),
    "#f008": (255, 0, 0, 136 / 255),
    "#12345680": (18, 52, 86, 128 / 255),
    "#000": (0, 0, 0, 1.0),
}

samples_rgb_hsv = {
    (255, 0, 0): (0.0, 1.0, 1.0),
    (0, 255, 0): (1 / 3, 1.0, 1.0),
    (0, 0, 255): (2 / 3, 1.0, 1.0),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (255, 0, 255): (5 / 6, 1.0, 1.0),
}

samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (1 / 3, 1.0, 0.5),
    (0, 0, 255): (2 / 3, 1.0, 0.5),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
    (128, 128, 128): (0.0, 0.0, 128 / 255),
}

samples_round_trip_rgb = [
    (0, 0, 0),
    (255, 255, 255),
    (200, 100, 50),
    (18, 52, 86),
    (35, 35, 35),
    (250, 10, 130),
]

samples_css_function_rgba = {
    "rgb(255, 0, 0)": (255, 0, 0, 1.0),
    "RGBA(138,138,138,0.5)": (138, 138, 138, 0.5),
    "rgb(100% 0% 0% / 50%)": (255, 0, 0, 0.5),
    "rgba(300, -5, 12.5, 2)": (255, 0, 12.5, 1.0),
    "hsl(120, 100%, 50%)": (0, 255, 0, 1.0),
    "hsl(240deg 100% 50% / 0.25)": (0, 0, 255, 0.25),
    "hsla(0,0%,100%,0.5)": (255, 255, 255, 0.5),
    "hsl(-120, 100, 50)": (0, 0, 255, 1.0),
}
