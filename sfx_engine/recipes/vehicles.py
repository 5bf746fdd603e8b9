from sfx_engine.core.types import WaveKind


def car(engine):
    """Playful honk: square base with a sine octave."""
    base = engine.generate_tone(220, 0.8, WaveKind.SQUARE)
    harmonic = engine.generate_tone(440, 0.6, WaveKind.SINE)
    if base is None or harmonic is None:
        return None

    honk = engine.combine_buffers([base, harmonic], [0.7, 0.3])
    return engine.apply_envelope(honk, 0.05, 0.1, 0.9, 0.65)


def train(engine):
    whistle = engine.generate_tone(800, 1.5, WaveKind.SINE)
    return engine.apply_envelope(whistle, 0.3, 0.2, 0.8, 0.8)


def plane(engine):
    drone = engine.generate_tone(200, 2.0, WaveKind.SAWTOOTH)
    return engine.apply_envelope(drone, 0.5, 0.3, 0.9, 1.2)


def helicopter(engine):
    rotor = engine.generate_tone(120, 1.5, WaveKind.SQUARE)
    return engine.apply_envelope(rotor, 0.2, 0.1, 0.9, 1.2)


def bicycle(engine):
    bell = engine.generate_tone(1200, 0.5, WaveKind.SINE)
    return engine.apply_envelope(bell, 0.01, 0.1, 0.6, 0.39)


def scooter(engine):
    buzz = engine.generate_tone(180, 1.0, WaveKind.SAWTOOTH)
    return engine.apply_envelope(buzz, 0.1, 0.2, 0.8, 0.7)


RECIPES = [
    ("🚗", car),
    ("🚂", train),
    ("✈️", plane),
    ("🚁", helicopter),
    ("🚴", bicycle),
    ("🛵", scooter),
]
