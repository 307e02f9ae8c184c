# algokit

A library of classic algorithms in plain Python. It covers modular arithmetic,
congruences, primes and sieves, combinatorics, modular matrices, graphs and 2D
computational geometry.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `algokit.modular` has `add`, `sub`, `mul`, `mulmod`, `binpow`, `gcd`, `lcm`,
  `extended_euclid` (returns `(g, x, y)`), `mod_inverse`, `inverse_prime` and `power`.
  The default modulus is 1 000 000 007.
- `algokit.congruence` has `crt`, `crt_system`, `intersect_progressions`, `inverse`,
  `congruence_solutions`, `find_any_solution` and `count_solutions`.
- `algokit.modint` has `ModInt`, an immutable integer modulo `mod` (default
  998 244 353). It supports `+ - * /`, `**`, unary `-`, `~` and `inverse()`.
- `algokit.matrix` has `Matrix`, with `zeros`, `identity`, element access by
  `m[i, j]`, modular `+` and `-`, matrix product `a @ b`, `pow(k)` and `**`.
  The default modulus is 998 244 353.
- `algokit.primes` has `phi`, `phi_table`, `Sieve` (`is_prime`,
  `prime_factorization`, `phi`, `primes`), `is_prime`, `primes_up_to`, `divisors`
  and `prime_factors`.
- `algokit.combinatorics` has `Binomial` (`ncr` from precomputed factorials),
  `count_bounded_solutions`, `floor_sum`, `ncr_approx`, `knight_placements`,
  `max_pair_gcd` and `count_pairs_with_free_gcd`.
- `algokit.segments` has `count_nested_segments`.
- `algokit.graphs` has `DisjointSet` (`find`, `same_set`, `size`, `union`) and
  `count_cycles`, which counts the back edges of a depth-first search.
- `algokit.debug` has `format_value`, `format_debug` and `debug`. `debug` writes
  named values with the caller's line number to standard error. It writes nothing
  when the `ONLINE_JUDGE` environment variable is set.
- `algokit.geometry.point` has `Point`, `sign`, `dot`, `cross`, `orientation`,
  rotations, `get_angle`, `polar_sort` and related helpers.
- `algokit.geometry.lines` has `Line` and functions for projections, distances and
  intersections of lines, segments and rays.
- `algokit.geometry.circles` has `Circle` (`circumscribed`, `inscribed`) and
  functions for circle relations, intersections, tangents and the Apollonius circle.
- `algokit.geometry.polygon` has area, centroid, convex hull, point-in-polygon
  tests, rotating calipers (`diameter`, `width`, `minimum_enclosing_rectangle`),
  `minimum_enclosing_circle`, `cut` and polygon distances.
- `algokit.geometry.regions` has `CircleUnion`, `HalfPlane`,
  `half_plane_intersection`, `polygon_union`, `minkowski_sum`,
  `polygon_circle_intersection`, `maximum_circle_cover`,
  `maximum_inscribed_circle`, `triangulate`, `Star` and `max_polygon_area`.

## Examples

```python
from algokit.modular import binpow, mod_inverse
from algokit.congruence import crt, intersect_progressions
from algokit.primes import Sieve, phi

binpow(2, 10, 1_000_000_007)        # 1024
mod_inverse(3, 11)                  # 4
crt(2, 3, 3, 5)                     # (8, 15)
intersect_progressions(3, 5, 1, 6)  # (13, 30)
phi(36)                             # 12

sieve = Sieve(100)
sieve.is_prime(97)                  # True
```

```python
from algokit.matrix import Matrix

fib = Matrix([[1, 1], [1, 0]])
fib.pow(10)[0, 1]                   # 55
(fib @ fib)[0, 0]                   # 2
```

```python
from algokit.geometry.point import Point, cross
from algokit.geometry.polygon import area, convex_hull

square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
area(square)                        # 4.0
convex_hull(square + [Point(1, 1)]) # the four corners
cross(Point(1, 0), Point(0, 1))     # 1.0
```

## Results and errors

Invalid input, such as a missing inverse or a degenerate shape, raises `ValueError`,
and an index outside a sieve or disjoint set raises `IndexError`. Some functions
have a legitimate "no answer" and return `None` for it instead. These are `crt`,
`crt_system`, `intersect_progressions`, `find_any_solution`,
`line_line_intersection`, `seg_seg_intersection`, `seg_line_intersection` and
`convex_line_intersection`. `winding_number` returns `None` for a point on the
boundary.

## What this package does not do

It is a library only. It has no command-line program and reads no input. Parsing
input and printing answers is left to the calling code.