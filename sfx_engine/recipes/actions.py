from sfx_engine.core.types import WaveKind

SPARKLE_NOTES = (1047, 1319, 1568, 1865)  # C6, E6, G6, Bb6


def boom(engine):
    """Cartoon boom: low thump plus a noise burst."""
    thump = engine.generate_tone(80, 0.5, WaveKind.SINE)
    noise = engine.generate_noise(0.3, 0.4)
    if thump is None or noise is None:
        return None

    blast = engine.combine_buffers([thump, noise], [0.8, 0.6])
    return engine.apply_envelope(blast, 0.01, 0.2, 0.3, 0.29)


def sparkle(engine):
    """Four high chimes entering 0.1 s apart."""
    mixer = engine.layer_mixer()
    for index, freq in enumerate(SPARKLE_NOTES):
        chime = engine.generate_tone(freq, 0.6, WaveKind.SINE)
        if chime is not None:
            mixer.add(f"chime_{index}", engine.apply_envelope(chime, 0.01, 0.2, 0.4, 0.39), gain=0.6, offset_s=index * 0.1)
    if not len(mixer):
        return None
    return mixer.mix(engine.silence(1.5))


def twinkle(engine):
    glint = engine.generate_sweep(1500, 2500, 0.8, WaveKind.SINE)
    return engine.apply_envelope(glint, 0.01, 0.2, 0.5, 0.59)


def celebration(engine):
    # party horn
    horn = engine.generate_sweep(400, 800, 1.0, WaveKind.SAWTOOTH)
    return engine.apply_envelope(horn, 0.01, 0.1, 0.8, 0.89)


def clap(engine):
    snap = engine.generate_noise(0.1, 0.8)
    return engine.apply_envelope(snap, 0.01, 0.02, 0.5, 0.07)


def dance(engine):
    beat = engine.generate_tone(120, 1.0, WaveKind.SQUARE)
    return engine.apply_envelope(beat, 0.01, 0.1, 0.8, 0.89)


def running(engine):
    steps = engine.generate_noise(0.8, 0.3)
    return engine.apply_envelope(steps, 0.05, 0.1, 0.7, 0.65)


RECIPES = [
    ("💥", boom),
    ("✨", sparkle),
    ("💫", twinkle),
    ("🎉", celebration),
    ("👏", clap),
    ("💃", dance),
    ("🏃", running),
]
