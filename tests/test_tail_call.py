import sys

from dial.interpreter import Interpreter


def test_self_tail_recursion_runs_in_constant_stack():
    """A 10,000-deep accumulator must not exhaust the Python stack."""
    interp = Interpreter()
    program = """
    (do
      (def sum-to (fn (n acc)
        (if (= n 0)
            acc
            (sum-to (- n 1) (+ n acc)))))
      (sum-to 10000 0))
    """
    assert interp.eval(program) == 50005000


def test_tail_recursion_deeper_than_recursion_limit():
    interp = Interpreter()
    depth = sys.getrecursionlimit() * 10
    interp.eval("(def count-down (fn (n) (if (= n 0) :done (count-down (- n 1)))))")
    assert str(interp.eval(f"(count-down {depth})")) == ":done"


def test_mutual_tail_recursion():
    interp = Interpreter()
    interp.eval_all("""
        (def even? (fn (n) (if (= n 0) true (odd? (- n 1)))))
        (def odd? (fn (n) (if (= n 0) false (even? (- n 1)))))
    """)
    assert interp.eval("(even? 20001)") is False
    assert interp.eval("(odd? 20001)") is True


def test_tail_calls_through_let_and_do():
    interp = Interpreter()
    interp.eval("""
    (def loop (fn (n acc)
      (let (next (- n 1))
        (do
          acc
          (if (< n 1) acc (loop next (+ acc 2)))))))
    """)
    assert interp.eval("(loop 20000 0)") == 40000
