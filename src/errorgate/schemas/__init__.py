from .result import StructuredResult, Redirect, Render, ViewInstruction

__all__ = ["StructuredResult", "Redirect", "Render", "ViewInstruction"]
