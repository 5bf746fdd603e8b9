from sfx_engine.core.types import WaveKind


def laugh(engine):
    """Four quick rising "ha"s, 0.2 s apart, each with its own envelope."""
    mixer = engine.layer_mixer()
    for i in range(4):
        ha = engine.generate_tone(300 + i * 50, 0.15, WaveKind.SINE)
        if ha is not None:
            mixer.add(f"ha_{i}", engine.apply_envelope(ha, 0.01, 0.05, 0.8, 0.09), gain=0.7, offset_s=i * 0.2)
    if not len(mixer):
        return None
    return mixer.mix(engine.silence(1.2))


def cry(engine):
    sob = engine.generate_sweep(400, 200, 1.0, WaveKind.SINE)
    return engine.apply_envelope(sob, 0.2, 0.3, 0.8, 0.5)


def snore(engine):
    rumble = engine.generate_tone(80, 1.5, WaveKind.SAWTOOTH)
    return engine.apply_envelope(rumble, 0.3, 0.2, 0.9, 1.0)


def sneeze(engine):
    burst = engine.generate_noise(0.3, 0.8)
    return engine.apply_envelope(burst, 0.01, 0.05, 0.8, 0.24)


def scream(engine):
    shriek = engine.generate_sweep(800, 1200, 0.8, WaveKind.SAWTOOTH)
    return engine.apply_envelope(shriek, 0.01, 0.1, 0.9, 0.69)


def yawn(engine):
    sigh = engine.generate_sweep(300, 150, 1.5, WaveKind.SINE)
    return engine.apply_envelope(sigh, 0.3, 0.5, 0.8, 0.7)


def yum(engine):
    hum = engine.generate_tone(500, 0.6, WaveKind.SINE)
    return engine.apply_envelope(hum, 0.05, 0.1, 0.8, 0.45)


RECIPES = [
    ("😂", laugh),
    ("😭", cry),
    ("😴", snore),
    ("🤧", sneeze),
    ("😱", scream),
    ("🥱", yawn),
    ("😋", yum),
]
