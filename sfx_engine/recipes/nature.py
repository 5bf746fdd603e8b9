"""Weather and nature. Most of these are shaped noise."""
from sfx_engine.core.types import WaveKind


def thunder(engine):
    rumble = engine.generate_noise(2.0, 0.9)
    return engine.apply_envelope(rumble, 0.01, 0.5, 0.7, 1.49)


def rain(engine):
    patter = engine.generate_noise(2.0, 0.3)
    return engine.apply_envelope(patter, 0.5, 0.2, 0.9, 1.3)


def wind(engine):
    gust = engine.generate_noise(1.5, 0.5)
    return engine.apply_envelope(gust, 0.3, 0.2, 0.8, 1.0)


def wave(engine):
    swell = engine.generate_sweep(200, 100, 2.0, WaveKind.SINE)
    return engine.apply_envelope(swell, 0.3, 0.5, 0.8, 1.2)


def fire(engine):
    crackle = engine.generate_noise(1.5, 0.4)
    return engine.apply_envelope(crackle, 0.2, 0.3, 0.8, 1.0)


def ice(engine):
    tinkle = engine.generate_tone(2000, 0.8, WaveKind.SINE)
    return engine.apply_envelope(tinkle, 0.01, 0.2, 0.4, 0.59)


RECIPES = [
    ("⚡", thunder),  # re-registered by technology (electric)
    ("🌧️", rain),
    ("💨", wind),
    ("🌊", wave),
    ("🔥", fire),
    ("❄️", ice),
]
