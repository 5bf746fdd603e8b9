from sfx_engine.core.types import EnvelopeParams, WaveKind

ARPEGGIO = (523, 659, 784)  # C5, E5, G5
ARPEGGIO_NOTE = EnvelopeParams(attack=0.01, decay=0.05, sustain=0.8, release=0.19)


def generic_playful(engine):
    """
    Fallback for emoji without a recipe: bouncy C-E-G arpeggio,
    0.25 s notes every 0.3 s in a 1 s buffer.
    """
    mixer = engine.layer_mixer()
    for index, freq in enumerate(ARPEGGIO):
        note = engine.generate_tone(freq, 0.25, WaveKind.SINE)
        if note is not None:
            mixer.add(f"note_{index}", engine.shape(note, ARPEGGIO_NOTE), gain=0.7, offset_s=index * 0.3)
    if not len(mixer):
        return None
    return mixer.mix(engine.silence(1.0))


def puzzle(engine):
    click = engine.generate_tone(800, 0.2, WaveKind.SINE)
    return engine.apply_envelope(click, 0.01, 0.03, 0.7, 0.16)


def unwrap(engine):
    rustle = engine.generate_noise(0.8, 0.4)
    return engine.apply_envelope(rustle, 0.05, 0.2, 0.7, 0.55)


def key(engine):
    jingle = engine.generate_tone(1200, 0.4, WaveKind.SINE)
    return engine.apply_envelope(jingle, 0.01, 0.05, 0.6, 0.34)


def old_key(engine):
    creak = engine.generate_tone(200, 0.8, WaveKind.SAWTOOTH)
    return engine.apply_envelope(creak, 0.05, 0.2, 0.8, 0.55)


def bling(engine):
    shine = engine.generate_sweep(1500, 3000, 0.6, WaveKind.SINE)
    return engine.apply_envelope(shine, 0.01, 0.1, 0.5, 0.49)


def regal(engine):
    fanfare = engine.generate_tone(523, 1.0, WaveKind.SINE)  # C5
    return engine.apply_envelope(fanfare, 0.1, 0.2, 0.8, 0.7)


RECIPES = [
    ("🧩", puzzle),
    ("🎁", unwrap),
    ("🔑", key),
    ("🗝️", old_key),
    ("💍", bling),
    ("👑", regal),
]
