"""White points of the CIE standard illuminants (CIE 1931 2° observer).

Values are tristimulus (Xn, Yn, Zn) normalized to Yn = 1.0.
"""

C = (0.98071, 1.0, 1.18225)
D50 = (0.9642, 1.0, 0.8249)
D65 = (0.95046, 1.0, 1.08906)
E = (1.0, 1.0, 1.0)

WHITE_POINTS = {
    "c": C,
    "d50": D50,
    "d65": D65,
    "e": E,
}
