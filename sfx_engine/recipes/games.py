from sfx_engine.core.types import WaveKind


def kick(engine):
    thud = engine.generate_tone(80, 0.3, WaveKind.SINE)
    return engine.apply_envelope(thud, 0.01, 0.05, 0.6, 0.24)


def bounce(engine):
    boing = engine.generate_sweep(400, 200, 0.3, WaveKind.SINE)
    return engine.apply_envelope(boing, 0.01, 0.05, 0.7, 0.24)


def target(engine):
    hit = engine.generate_tone(1500, 0.2, WaveKind.SINE)
    return engine.apply_envelope(hit, 0.01, 0.03, 0.8, 0.16)


def dice(engine):
    rattle = engine.generate_noise(0.5, 0.4)
    return engine.apply_envelope(rattle, 0.05, 0.1, 0.7, 0.35)


def card(engine):
    flip = engine.generate_noise(0.1, 0.3)
    return engine.apply_envelope(flip, 0.01, 0.02, 0.8, 0.07)


RECIPES = [
    ("⚽", kick),
    ("🏀", bounce),
    ("🎯", target),
    ("🎲", dice),
    ("🃏", card),
]
