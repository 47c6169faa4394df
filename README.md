# signalkit

Small, dependency-free audio processing units that work one sample at a time.
Every unit is a plain Python object: build it with the sample rate, change its
settings through attributes or properties, and call `process` for each sample.

## Installation

```
pip install signalkit
```

To run the test suite, install the `test` extra and run `pytest`:

```
pip install "signalkit[test]"
pytest
```

## What is inside

- **Shared helpers** (`signalkit.core`): `clamp`, `one_pole`, `soft_limit`,
  the band-limited step helpers `this_blep_sample` and `next_blep_sample`,
  `random_int`, and a block peak `Limiter`.
- **Filters**: `ATone` (`signalkit.atone`, high-pass), `Biquad`
  (`signalkit.biquad`, two-pole resonant filter with `cutoff` and `res`),
  `Allpass` and `Comb` (delay-buffer filters sized in samples), `Mode`
  (resonant modal filter), `MoogLadder` (ladder low-pass), `NlFilt`
  (non-linear filter working on blocks) and `DcBlock`.
- **Envelopes and control**: `AdEnv` (attack/decay envelope with
  `AdEnvSegment` stages), `Line` (linear ramp with a `finished` flag),
  `Metro` (returns `True` on each tick) and `Jitter` (random
  piecewise-linear signal).
- **Effects and level**: `Autowah`, `Balance` (matches one signal's level to
  another), `Bitcrush`, `Fold` (sample-and-hold) and `CrossFade` (with the
  `CrossFadeCurve` curves `LIN`, `CPOW`, `LOG` and `EXP`).
- **Sound sources**: `BlOsc` (band-limited triangle, saw and square, chosen
  with `Waveform`), `FormantOscillator`, `GrainletOscillator`, `Drip`
  (dripping-water model), and in `signalkit.hihat` the metallic noise source
  `SquareNoise` with the amplifier shapes `swing_vca` and `linear_vca`.

## Example

```python
from signalkit.adenv import AdEnv, AdEnvSegment
from signalkit.biquad import Biquad
from signalkit.blosc import BlOsc, Waveform

sample_rate = 48_000.0
osc = BlOsc(sample_rate)
osc.freq = 220.0
osc.waveform = Waveform.SAW

env = AdEnv(sample_rate)
env.set_time(AdEnvSegment.ATTACK, 0.01)
env.set_time(AdEnvSegment.DECAY, 0.2)
env.trigger()

lowpass = Biquad(sample_rate)
lowpass.cutoff = 2000.0

block = [lowpass.process(osc.process() * env.process()) for _ in range(4800)]
```

Block processors take an iterable of floats and return a new list:

```python
from signalkit.core import Limiter

limiter = Limiter()
limited = limiter.process_block([0.2, 1.5, -3.0], pre_gain=1.0)
```

## What it does not do

signalkit only computes samples. It does not open audio devices, play or
record sound, or read and write audio files; hand the numbers it produces to
whatever audio output or file library you use. There is no command-line
program.

The modules import nothing outside the standard library.