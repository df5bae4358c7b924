"""
Ready-to-use operator systems.

- simple_math: arithmetic, comparison and IF/ELSE/ENDIF over Value
- pokemon: a toy state machine over a custom value kind
"""
