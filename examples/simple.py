import sys

from chord_transposer import TransposeSession
from chord_transposer.sheet import transpose_sheet

text = """[Verse]
G       D/F#     Em
Amazing grace, how sweet
"""

# Only the chord line moves; the lyric line stays as written
sys.stdout.write(transpose_sheet(text, 2))

# Step the key the way a musician would on stage
session = TransposeSession(
    original_key="G",
    chords="G D/F# Em C",
    on_transpose=lambda chords, semitones: sys.stdout.write(f"{semitones:+d}: {chords}\n"),
)
session.up()
session.up()
sys.stdout.write(f"Key: {session.current_key} ({session.offset_label})\n")
session.reset()
