"""Animal sounds: meows, chirps, croaks, buzzes and farmyard calls."""
from sfx_engine.core.types import WaveKind
from sfx_engine.recipes.misc import generic_playful


def cat(engine):
    """Soft meow: rising then falling sweep, second half overlapping at 0.4 s."""
    meow1 = engine.generate_sweep(300, 600, 0.4, WaveKind.SINE)
    meow2 = engine.generate_sweep(600, 400, 0.6, WaveKind.SINE)
    if meow1 is None or meow2 is None:
        return None

    mixer = engine.layer_mixer()
    mixer.add("rise", meow1, gain=0.8)
    mixer.add("fall", meow2, gain=0.8, offset_s=0.4)
    return engine.apply_envelope(mixer.mix(engine.silence(1.0)), 0.05, 0.1, 0.7, 0.35)


def lizard(engine):
    """Squeaky high chirp."""
    chirp = engine.generate_sweep(1200, 1800, 0.3, WaveKind.SINE)
    return engine.apply_envelope(chirp, 0.01, 0.05, 0.6, 0.24)


def frog(engine):
    croak = engine.generate_sweep(200, 150, 0.4, WaveKind.SQUARE)
    return engine.apply_envelope(croak, 0.05, 0.1, 0.8, 0.25)


def bird(engine):
    """Two upward chirps, 0.3 s apart. No overall envelope."""
    chirp1 = engine.generate_sweep(2000, 3000, 0.2, WaveKind.SINE)
    chirp2 = engine.generate_sweep(2500, 3500, 0.15, WaveKind.SINE)
    if chirp1 is None or chirp2 is None:
        return None

    mixer = engine.layer_mixer()
    mixer.add("chirp1", chirp1, gain=0.6)
    mixer.add("chirp2", chirp2, gain=0.6, offset_s=0.3)
    return mixer.mix(engine.silence(0.8))


def bee(engine):
    buzz = engine.generate_tone(350, 1.0, WaveKind.SAWTOOTH)
    return engine.apply_envelope(buzz, 0.1, 0.2, 0.9, 0.7)


def moo(engine):
    low = engine.generate_sweep(150, 100, 1.2, WaveKind.SQUARE)
    return engine.apply_envelope(low, 0.2, 0.3, 0.8, 0.7)


def oink(engine):
    grunt = engine.generate_tone(400, 0.3, WaveKind.SQUARE)
    return engine.apply_envelope(grunt, 0.01, 0.05, 0.9, 0.24)


def squeak(engine):
    chirp = engine.generate_sweep(1500, 2000, 0.2, WaveKind.SINE)
    return engine.apply_envelope(chirp, 0.01, 0.02, 0.8, 0.17)


def quack(engine):
    honk = engine.generate_tone(300, 0.4, WaveKind.SQUARE)
    return engine.apply_envelope(honk, 0.02, 0.08, 0.7, 0.3)


RECIPES = [
    ("🐱", cat),
    ("🐶", generic_playful),  # bark
    ("🦎", lizard),
    ("🐸", frog),
    ("🐦", bird),
    ("🐝", bee),
    ("🐄", moo),
    ("🐷", oink),
    ("🐭", squeak),
    ("🦆", quack),
]
