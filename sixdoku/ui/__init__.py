# Presentation layer: PyQt6 widgets that render a PuzzleSession
