# 文件: PyMises/mises/materials/plastic/yield_functions.py
"""
屈服函数模块

提供:
- VonMises: Von Mises (J2) 屈服准则，以相对偏应力 ξ = s - α 的范数表示

扩展指南:
    要添加新的屈服函数，只需创建一个类实现以下方法:
    - evaluate(stress_dev, yield_stress, mode) -> float
    - gradient(stress_dev, mode) -> np.ndarray
"""

import numpy as np

from ..interfaces import MaterialMode
from .. import tensors


class VonMises:
    """
    Von Mises (J2) 屈服准则

    屈服函数: f = ‖ξ‖ - √(2/3)·σ_y
    其中 ‖ξ‖ = √(ξ:ξ) 为相对偏应力的 Frobenius 范数，
    等价于 σ_eq = √(3/2)·‖ξ‖ ≤ σ_y。

    Example:
        yield_fn = VonMises()
        f = yield_fn.evaluate(xi_trial, yield_stress=200.0, mode=MaterialMode.THREE_D)
        if f > 0:
            n = yield_fn.gradient(xi_trial, MaterialMode.THREE_D)
    """

    def norm(self, stress_dev: np.ndarray, mode: MaterialMode) -> float:
        """相对偏应力范数 ‖ξ‖"""
        return tensors.stress_norm(stress_dev, mode)

    def evaluate(self, stress_dev: np.ndarray, yield_stress: float, mode: MaterialMode) -> float:
        """
        计算屈服函数值

        Args:
            stress_dev: 相对偏应力约化向量 ξ (应力分量形式)
            yield_stress: 当前屈服应力 σ_y
            mode: 材料模式

        Returns:
            f: f <= 0 弹性; f > 0 需要塑性修正
        """
        return self.norm(stress_dev, mode) - np.sqrt(2.0 / 3.0) * yield_stress

    def gradient(self, stress_dev: np.ndarray, mode: MaterialMode) -> np.ndarray:
        """
        流动方向 n = ξ / ‖ξ‖ (单位张量，应力分量形式)

        ‖ξ‖ = 0 时返回零向量，不做归一化。
        """
        norm = self.norm(stress_dev, mode)
        if norm == 0.0:
            return np.zeros_like(stress_dev)
        return stress_dev / norm

    def equivalent_stress(self, stress_dev: np.ndarray, mode: MaterialMode) -> float:
        """Von Mises 等效应力 σ_eq = √(3/2)·‖ξ‖"""
        return np.sqrt(1.5) * self.norm(stress_dev, mode)

    def __repr__(self) -> str:
        return "VonMises()"
