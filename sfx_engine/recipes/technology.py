from sfx_engine.core.types import WaveKind


def typing(engine):
    click = engine.generate_tone(1200, 0.05, WaveKind.SQUARE)
    return engine.apply_envelope(click, 0.01, 0.01, 0.8, 0.03)


def notification(engine):
    ding = engine.generate_tone(1000, 0.3, WaveKind.SINE)
    return engine.apply_envelope(ding, 0.01, 0.05, 0.7, 0.24)


def camera(engine):
    shutter = engine.generate_noise(0.1, 0.5)
    return engine.apply_envelope(shutter, 0.01, 0.02, 0.8, 0.07)


def printer(engine):
    buzz = engine.generate_tone(300, 1.0, WaveKind.SQUARE)
    return engine.apply_envelope(buzz, 0.1, 0.1, 0.8, 0.8)


def electric(engine):
    zap = engine.generate_noise(0.2, 0.8)
    return engine.apply_envelope(zap, 0.01, 0.03, 0.7, 0.16)


RECIPES = [
    ("💻", typing),
    ("📱", notification),
    ("📷", camera),
    ("🖨️", printer),
    ("⚡", electric),  # overrides nature's thunder
]
