"""
Adam update rule.

This module provides the Adam update policy used by the `SGD` driver (see
`AdamType`). The policy keeps exponentially decaying averages of past
gradients (first moment) and past squared gradients (second moment) and
applies bias correction to both before every step.

Design notes
------------
- The policy does not know about the objective function or about
  iteration control; it only maps one gradient to one in-place step.
- State (``m``, ``v``, ``t``) is (re)allocated by `initialize()`, which the
  driver calls at the start of every optimization run.
- All math is element-wise. Each coordinate of the iterate evolves
  independently of the others.
"""

from __future__ import annotations

from typing import Optional, Tuple

import numpy as np

from ...domain._errors import ShapeMismatchError


def _check_decay(name: str, value: float) -> float:
    """
    Validate an exponential decay rate, which must lie in ``[0, 1)``.
    """
    value = float(value)
    if not (0.0 <= value < 1.0):
        raise ValueError(f"{name} must be in [0, 1), got {value}")
    return value


def _check_epsilon(value: float) -> float:
    """
    Validate the denominator floor, which must be strictly positive.
    """
    value = float(value)
    if value <= 0.0:
        raise ValueError(f"eps must be > 0, got {value}")
    return value


class AdamUpdate:
    """
    Adam update policy.

    Update rule
    -----------
    Let ``g_t`` be the gradient at step ``t``:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        v_t = beta2 * v_{t-1} + (1 - beta2) * (g_t ** 2)

        m_hat = m_t / (1 - beta1^t)
        v_hat = v_t / (1 - beta2^t)

        x <- x - step_size * m_hat / (sqrt(v_hat) + eps)

    Parameters
    ----------
    epsilon : float, optional
        Value added to the denominator. Must be positive. Defaults to 1e-8.
    beta1 : float, optional
        Exponential decay rate for the first moment estimates, in ``[0, 1)``.
        Defaults to 0.9.
    beta2 : float, optional
        Exponential decay rate for the second moment estimates, in
        ``[0, 1)``. Defaults to 0.999.

    Notes
    -----
    - At ``t = 1`` the bias-correction denominators are ``1 - beta1`` and
      ``1 - beta2``, which are strictly positive by construction.
    - NaN/Inf gradients are not guarded against and propagate into the
      iterate.
    """

    def __init__(
        self,
        epsilon: float = 1e-8,
        beta1: float = 0.9,
        beta2: float = 0.999,
    ) -> None:
        """
        Construct an Adam update policy.

        Raises
        ------
        ValueError
            If any hyperparameter is outside its valid range.
        """
        self._epsilon = _check_epsilon(epsilon)
        self._beta1 = _check_decay("beta1", beta1)
        self._beta2 = _check_decay("beta2", beta2)

        self._m: Optional[np.ndarray] = None
        self._v: Optional[np.ndarray] = None
        self._t = 0

    @property
    def epsilon(self) -> float:
        return self._epsilon

    @epsilon.setter
    def epsilon(self, value: float) -> None:
        self._epsilon = _check_epsilon(value)

    @property
    def beta1(self) -> float:
        return self._beta1

    @beta1.setter
    def beta1(self, value: float) -> None:
        self._beta1 = _check_decay("beta1", value)

    @property
    def beta2(self) -> float:
        return self._beta2

    @beta2.setter
    def beta2(self, value: float) -> None:
        self._beta2 = _check_decay("beta2", value)

    @property
    def m(self) -> Optional[np.ndarray]:
        """First moment estimate (``None`` before `initialize`)."""
        return self._m

    @property
    def v(self) -> Optional[np.ndarray]:
        """Second moment estimate (``None`` before `initialize`)."""
        return self._v

    @property
    def t(self) -> int:
        """Number of updates applied since the last `initialize`."""
        return self._t

    def initialize(self, shape: Tuple[int, ...]) -> None:
        """
        Allocate zeroed moment estimates and reset the step counter.

        Parameters
        ----------
        shape : tuple[int, ...]
            Shape of the iterate that will be optimized.
        """
        self._m = np.zeros(shape, dtype=np.float64)
        self._v = np.zeros(shape, dtype=np.float64)
        self._t = 0

    def _check_state(self, iterate: np.ndarray, gradient: np.ndarray) -> None:
        if self._m is None:
            raise RuntimeError(
                f"{type(self).__name__}.update() called before initialize()"
            )
        if gradient.shape != self._m.shape:
            raise ShapeMismatchError(self._m.shape, gradient.shape)
        if iterate.shape != self._m.shape:
            raise ShapeMismatchError(self._m.shape, iterate.shape)

    def update(
        self, iterate: np.ndarray, step_size: float, gradient: np.ndarray
    ) -> None:
        """
        Apply one Adam step to ``iterate`` in place.

        Parameters
        ----------
        iterate : np.ndarray
            Current point, modified in place.
        step_size : float
            Step size for this update.
        gradient : np.ndarray
            Gradient of the visited term at ``iterate``.

        Raises
        ------
        RuntimeError
            If called before `initialize`.
        ShapeMismatchError
            If ``gradient`` or ``iterate`` does not match the state shape.
        """
        self._check_state(iterate, gradient)
        b1, b2 = self._beta1, self._beta2

        self._t += 1
        t = self._t

        # m = b1*m + (1-b1)*g
        # v = b2*v + (1-b2)*(g*g)
        self._m *= b1
        self._m += (1.0 - b1) * gradient
        self._v *= b2
        self._v += (1.0 - b2) * (gradient * gradient)

        # bias correction
        m_hat = self._m / (1.0 - (b1**t))
        v_hat = self._v / (1.0 - (b2**t))

        iterate -= step_size * m_hat / (np.sqrt(v_hat) + self._epsilon)
