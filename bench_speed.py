import cssmatrix
from cssmatrix import TransformMatrix
import timeit


m = cssmatrix.multiply(cssmatrix.rotate_x(30), cssmatrix.translate3d(1, 2, 3))
m_list = m.tolist()
cssmatrix.inverse(m)  # warmup the jit

print("Creation")
print(timeit.timeit(lambda: cssmatrix.rotate_x(30), number=1_000_000))
print(timeit.timeit(lambda: TransformMatrix.rotate_x(30), number=1_000_000))

print("format (array passthrough)")
print(timeit.timeit(lambda: cssmatrix.format(m), number=1_000_000))

print("format (list)")
print(timeit.timeit(lambda: cssmatrix.format(m_list), number=1_000_000))

print("multiply")
print(timeit.timeit(lambda: cssmatrix.multiply(m, m), number=1_000_000))

print("inverse")
print(timeit.timeit(lambda: cssmatrix.inverse(m), number=1_000_000))

print("to_string")
print(timeit.timeit(lambda: cssmatrix.to_string(m), number=100_000))

s = cssmatrix.to_string(m)
print("from_string")
print(timeit.timeit(lambda: cssmatrix.from_string(s), number=100_000))
