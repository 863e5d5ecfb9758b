"""Regenerate the even-subalgebra product table of G(4,0,1) and find discrepancies."""
import torch

from pga4d.pga.algebra import BLADES, BLADE_INDEX, FIELDS, PRODUCT_TABLE

# Metric: e0^2 = 0, e1^2 = e2^2 = e3^2 = e4^2 = 1
metric = {0: 0, 1: 1, 2: 1, 3: 1, 4: 1}


def multiply_sorted_blades(a, b):
    """Multiply two canonical blades by counting inversions.

    Moving every vector of b left past the larger vectors of a costs one
    sign flip per pair; shared vectors then meet and contract through
    the metric.
    """
    swaps = sum(1 for x in a for y in b if x > y)
    sign = -1 if swaps % 2 else 1
    for shared in set(a) & set(b):
        sign *= metric[shared]
    blade = tuple(sorted(set(a) ^ set(b)))
    return blade, sign


table = torch.zeros_like(PRODUCT_TABLE)
for i, blade_i in enumerate(BLADES):
    for j, blade_j in enumerate(BLADES):
        blade, sign = multiply_sorted_blades(blade_i, blade_j)
        if sign != 0:
            table[i, j, BLADE_INDEX[blade]] = sign

errors = (table != PRODUCT_TABLE).nonzero().tolist()

print(f"Found {len(errors)} discrepancies:")
for i, j, k in errors:
    print(f"  {FIELDS[i]} * {FIELDS[j]} -> {FIELDS[k]}")
    print(f"    TABLE: {PRODUCT_TABLE[i, j, k].item():+.0f}")
    print(f"    RECOMPUTED: {table[i, j, k].item():+.0f}")

# Print the product in closed form for review against hand derivations
print("\n\n# Closed form of a * b:")
for k, name in enumerate(FIELDS):
    terms = []
    for i, j in (PRODUCT_TABLE[:, :, k] != 0).nonzero().tolist():
        sign = '+' if PRODUCT_TABLE[i, j, k] > 0 else '-'
        terms.append(f"{sign} a.{FIELDS[i]}*b.{FIELDS[j]}")
    print(f"{name:>6} = " + ' '.join(terms))
