"""Objects, tools and instruments."""
from sfx_engine.core.types import WaveKind

BELL_PARTIALS = (800, 1600, 2400)
C_MAJOR = (523, 659, 784)  # C5, E5, G5


def bell(engine):
    """
    Clear bell: fundamental plus two harmonics with shorter tails.
    Length is set by the 1.5 s fundamental.
    """
    fundamental = engine.generate_tone(BELL_PARTIALS[0], 1.5, WaveKind.SINE)
    harmonic2 = engine.generate_tone(BELL_PARTIALS[1], 1.2, WaveKind.SINE)
    harmonic3 = engine.generate_tone(BELL_PARTIALS[2], 0.8, WaveKind.SINE)
    if fundamental is None or harmonic2 is None or harmonic3 is None:
        return None

    ring = engine.combine_buffers([fundamental, harmonic2, harmonic3], [1, 0.5, 0.3])
    return engine.apply_envelope(ring, 0.01, 0.3, 0.3, 1.2)


def phone(engine):
    ring1 = engine.generate_tone(800, 0.5, WaveKind.SINE)
    ring2 = engine.generate_tone(1000, 0.4, WaveKind.SINE)
    if ring1 is None or ring2 is None:
        return None

    ring = engine.combine_buffers([ring1, ring2], [0.7, 0.5])
    return engine.apply_envelope(ring, 0.01, 0.1, 0.8, 0.39)


def alarm(engine):
    beep = engine.generate_tone(1000, 1.0, WaveKind.SQUARE)
    return engine.apply_envelope(beep, 0.01, 0.05, 0.9, 0.94)


def music(engine):
    """C major chord; any note the engine fails to render is left out."""
    notes = [engine.generate_tone(freq, 1.0, WaveKind.SINE) for freq in C_MAJOR]
    notes = [n for n in notes if n is not None]
    if not notes:
        return None

    chord = engine.combine_buffers(notes, [0.5, 0.5, 0.5])
    return engine.apply_envelope(chord, 0.05, 0.2, 0.7, 0.73)


def guitar(engine):
    strum = engine.generate_tone(330, 1.2, WaveKind.SAWTOOTH)
    return engine.apply_envelope(strum, 0.01, 0.3, 0.6, 0.89)


def drum(engine):
    """Low sine thump with a short noise burst on top."""
    kick = engine.generate_tone(60, 0.3, WaveKind.SINE)
    noise = engine.generate_noise(0.1, 0.3)
    if kick is None or noise is None:
        return None

    hit = engine.combine_buffers([kick, noise], [0.8, 0.4])
    return engine.apply_envelope(hit, 0.01, 0.05, 0.3, 0.24)


def piano(engine):
    note = engine.generate_tone(523, 1.5, WaveKind.SINE)  # C5
    return engine.apply_envelope(note, 0.01, 0.3, 0.5, 1.19)


def megaphone(engine):
    voice = engine.generate_tone(400, 0.8, WaveKind.SQUARE)
    return engine.apply_envelope(voice, 0.05, 0.1, 0.9, 0.65)


RECIPES = [
    ("🔔", bell),
    ("📞", phone),
    ("⏰", alarm),
    ("🎵", music),
    ("🎸", guitar),
    ("🥁", drum),
    ("🎹", piano),
    ("📢", megaphone),
]
