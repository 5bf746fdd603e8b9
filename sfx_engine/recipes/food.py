from sfx_engine.core.types import WaveKind


def crunch(engine):
    bite = engine.generate_noise(0.4, 0.6)
    return engine.apply_envelope(bite, 0.01, 0.08, 0.6, 0.31)


def slurp(engine):
    straw = engine.generate_sweep(300, 150, 0.8, WaveKind.SAWTOOTH)
    return engine.apply_envelope(straw, 0.05, 0.2, 0.8, 0.55)


def nom(engine):
    chomp = engine.generate_tone(250, 0.3, WaveKind.SQUARE)
    return engine.apply_envelope(chomp, 0.01, 0.05, 0.8, 0.24)


def sticky(engine):
    stretch = engine.generate_sweep(150, 300, 0.6, WaveKind.SINE)
    return engine.apply_envelope(stretch, 0.1, 0.2, 0.8, 0.3)


def gulp(engine):
    swallow = engine.generate_sweep(400, 200, 0.5, WaveKind.SINE)
    return engine.apply_envelope(swallow, 0.05, 0.1, 0.7, 0.35)


def pop(engine):
    burst = engine.generate_tone(800, 0.1, WaveKind.SQUARE)
    return engine.apply_envelope(burst, 0.01, 0.02, 0.8, 0.07)


RECIPES = [
    ("🍎", crunch),
    ("🥤", slurp),
    ("🍕", nom),
    ("🍯", sticky),
    ("🥛", gulp),
    ("🍿", pop),
]
