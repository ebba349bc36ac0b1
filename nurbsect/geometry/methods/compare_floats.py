from nurbsect.config import Settings


class CompareFloats(object):
    """
    Float comparisons with an absolute tolerance. Two values closer than
    *abs_tol* (default *ptol*) count as equal, so the strict tests exclude
    them.
    """

    @staticmethod
    def eq(a, b, abs_tol=None):
        if a == b:
            return True
        if abs_tol is None:
            abs_tol = Settings.ptol
        return abs(b - a) <= abs_tol

    @staticmethod
    def gt(a, b, abs_tol=None):
        if CompareFloats.eq(a, b, abs_tol):
            return False
        return a > b

    @staticmethod
    def lt(a, b, abs_tol=None):
        if CompareFloats.eq(a, b, abs_tol):
            return False
        return a < b

    @staticmethod
    def ge(a, b, abs_tol=None):
        if CompareFloats.eq(a, b, abs_tol):
            return True
        return a > b

    @staticmethod
    def le(a, b, abs_tol=None):
        if CompareFloats.eq(a, b, abs_tol):
            return True
        return a < b

    @staticmethod
    def between(x, a, b, abs_tol=None):
        """
        *True* if a <= x <= b, or if *x* is within tolerance of either end.

        :rtype: bool
        """
        if a <= x <= b:
            return True
        return CompareFloats.eq(x, a, abs_tol) or CompareFloats.eq(x, b,
                                                                   abs_tol)

    @staticmethod
    def check_bounds(x, a, b):
        """
        *x* clamped to [a, b].
        """
        if x < a:
            return a
        if x > b:
            return b
        return x
