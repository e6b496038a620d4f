"""Click-driven simulations: amino acid builder, peptide bond, folding, matching.

Each module exposes pure transition functions over the state models in
`states`; the Gradio tabs keep those states in `gr.State`.
"""

from . import amino_builder, coordinates, folding, matching, peptide, timer

__all__ = [
    "amino_builder",
    "coordinates",
    "folding",
    "matching",
    "peptide",
    "timer",
]
