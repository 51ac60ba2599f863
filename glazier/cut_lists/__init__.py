"""
Manufacturing cut lists.

Closed-form linear formulas over overall width and height, one table per
profile line and opening type. Formulas are data: each line module keeps
them as named constants so they can be audited against the drawings.
"""
