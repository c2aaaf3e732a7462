"""
AdaMax update rule.

AdaMax is the infinity-norm variant of Adam. The first moment is tracked
exactly as in Adam, but the second moment is replaced by an exponentially
weighted infinity norm: the per-coordinate maximum of the decayed norm and
the magnitude of the newest gradient. The effective step is therefore
bounded by the largest recently observed gradient magnitude rather than by
its decayed RMS.
"""

from __future__ import annotations

import numpy as np

from ._adam_update import AdamUpdate


class AdaMaxUpdate(AdamUpdate):
    """
    AdaMax update policy.

    Update rule
    -----------
    Let ``g_t`` be the gradient at step ``t``:

        m_t = beta1 * m_{t-1} + (1 - beta1) * g_t
        u_t = max(beta2 * u_{t-1}, |g_t|)

        x <- x - (step_size / (1 - beta1^t)) * m_t / (u_t + eps)

    ``u`` is exposed as `v` so both policies share the same state layout.
    There is no bias correction on ``u``.
    """

    def update(
        self, iterate: np.ndarray, step_size: float, gradient: np.ndarray
    ) -> None:
        """
        Apply one AdaMax step to ``iterate`` in place.

        Parameters
        ----------
        iterate : np.ndarray
            Current point, modified in place.
        step_size : float
            Step size for this update.
        gradient : np.ndarray
            Gradient of the visited term at ``iterate``.
        """
        self._check_state(iterate, gradient)
        b1, b2 = self._beta1, self._beta2

        self._t += 1
        t = self._t

        self._m *= b1
        self._m += (1.0 - b1) * gradient

        # exponentially weighted infinity norm
        np.maximum(b2 * self._v, np.abs(gradient), out=self._v)

        bias_corrected_step = step_size / (1.0 - (b1**t))
        iterate -= bias_corrected_step * self._m / (self._v + self._epsilon)
