# Reference values from https://oklch.com and the CSS Color 4 sample code.

# (r, g, b) 0-255 -> (l, c, h)
samples_rgb_oklch = {
    (255, 0, 0): (0.62796, 0.25768, 29.234),
    (0, 255, 0): (0.86644, 0.29483, 142.495),
    (0, 0, 255): (0.45201, 0.31321, 264.052),
    (255, 255, 0): (0.96798, 0.21101, 109.769),
    (0, 255, 255): (0.90540, 0.15455, 194.769),
    (255, 0, 255): (0.70167, 0.32249, 328.363),
    (255, 255, 255): (1.0, 0.0, 0.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (r, g, b) 0-255 -> (h, s, l)
samples_rgb_hsl = {
    (255, 0, 0): (0.0, 1.0, 0.5),
    (0, 255, 0): (120.0, 1.0, 0.5),
    (0, 0, 255): (240.0, 1.0, 0.5),
    (255, 255, 0): (60.0, 1.0, 0.5),
    (255, 0, 255): (300.0, 1.0, 0.5),
    (255, 128, 0): (30.118, 1.0, 0.5),
    (64, 128, 192): (210.0, 0.50394, 0.50196),
    (128, 128, 128): (0.0, 0.0, 0.50196),
    (255, 255, 255): (0.0, 0.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (r, g, b) 0-255 -> Display P3 (r, g, b) 0-1
samples_rgb_p3 = {
    (255, 0, 0): (0.91749, 0.20029, 0.13856),
    (0, 255, 0): (0.45844, 0.98526, 0.29832),
    (255, 255, 255): (1.0, 1.0, 1.0),
    (0, 0, 0): (0.0, 0.0, 0.0),
}

# (r, g, b) 0-255 -> WCAG relative luminance
samples_luminance = {
    (0, 0, 0): 0.0,
    (255, 255, 255): 1.0,
    (255, 0, 0): 0.2126,
    (0, 255, 0): 0.7152,
    (0, 0, 255): 0.0722,
    (128, 128, 128): 0.21586,
}

# every 8-bit gray plus a spread of saturated and muted colors
round_trip_rgb = [(v, v, v) for v in range(0, 256, 15)] + [
    (255, 0, 0), (0, 255, 0), (0, 0, 255),
    (12, 200, 99), (240, 17, 180), (33, 33, 200),
    (250, 250, 5), (1, 2, 3), (254, 253, 252),
    (128, 64, 32), (77, 166, 255), (210, 105, 30),
]
