class Settings(object):
    """
    Settings.

    Class-level defaults used when a tolerance or limit is not passed
    explicitly. Methods always take their tolerances as arguments and only
    fall back to these values when the argument is *None*.

    :var float gtol: Geometric tolerance for point coincidence
        (default=1.0e-6).
    :var float ptol: Parametric tolerance (default=1.0e-9).
    :var float eps: Guard for near-zero denominators and near-parallel
        directions (default=1.0e-10).
    :var int maxiter: Iteration budget of the intersection minimizer
        (default=100).
    :var float ftol: Flatness tolerance used to subdivide Bezier pieces
        during curve intersection (default=1.0e-3).
    """
    # Class variables for settings.
    gtol = 1.0e-6
    ptol = 1.0e-9
    eps = 1.0e-10
    maxiter = 100
    ftol = 1.0e-3

    @classmethod
    def set_gtol(cls, gtol=1.0e-6):
        """
        Set the default geometric tolerance.

        :param float gtol: Geometric tolerance.
        """
        cls.gtol = float(gtol)

    @classmethod
    def set_ptol(cls, ptol=1.0e-9):
        """
        Set the default parametric tolerance.

        :param float ptol: Parametric tolerance.
        """
        cls.ptol = float(ptol)

    @classmethod
    def set_eps(cls, eps=1.0e-10):
        """
        Set the default near-zero guard.

        :param float eps: Near-zero guard.
        """
        cls.eps = float(eps)

    @classmethod
    def set_maxiter(cls, maxiter=100):
        """
        Set the default iteration budget of the intersection minimizer.

        :param int maxiter: Maximum number of iterations.
        """
        cls.maxiter = int(maxiter)

    @classmethod
    def set_ftol(cls, ftol=1.0e-3):
        """
        Set the default tolerance for curve flatness criteria.

        :param float ftol: Flatness tolerance.
        """
        cls.ftol = float(ftol)

    @classmethod
    def reset(cls):
        """
        Restore all default values.
        """
        cls.set_gtol()
        cls.set_ptol()
        cls.set_eps()
        cls.set_maxiter()
        cls.set_ftol()
