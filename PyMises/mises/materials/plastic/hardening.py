# 文件: PyMises/mises/materials/plastic/hardening.py
"""
硬化规律模块

提供:
- IsotropicHardening: 线性 + 指数饱和型等向硬化
- KinematicHardening: 线性随动硬化 (背应力模量 H_k(κ) = Hk·κ)

扩展指南:
    要添加新的等向硬化模型，只需创建一个类实现以下方法:
    - get_yield_stress(kappa) -> float
    - get_hardening_modulus(kappa) -> float
"""

import numpy as np

from ..errors import MaterialConfigurationError


def _check_parameter(name: str, value: float) -> float:
    value = float(value)
    if not np.isfinite(value):
        raise MaterialConfigurationError(f"{name} must be finite, got {value}")
    if value < 0:
        raise MaterialConfigurationError(f"{name} must be non-negative, got {value}")
    return value


class IsotropicHardening:
    """
    等向硬化 (线性 + 指数饱和)

    屈服应力随累积塑性应变 κ 增长:
        σ_y(κ) = σ0 + Hi·κ + Y·(1 - exp(-expD·κ))

    硬化模量:
        σ_y'(κ) = Hi + Y·expD·exp(-expD·κ)

    Hi = Y = 0 时退化为理想塑性。

    Example:
        hardening = IsotropicHardening(yield_stress=200.0, Hi=1000.0)
        sigma_y = hardening.get_yield_stress(kappa=0.01)  # 返回 210.0
    """

    def __init__(self, yield_stress: float, Hi: float = 0.0, Y: float = 0.0, expD: float = 0.0):
        """
        Args:
            yield_stress: 初始屈服应力 σ0 (>= 0)
            Hi: 线性硬化模量 (>= 0)
            Y: 饱和硬化幅值 (>= 0)
            expD: 饱和速率 (>= 0)

        Raises:
            MaterialConfigurationError: 参数为负或非有限值
        """
        self.yield_stress = _check_parameter("yield_stress", yield_stress)
        self.Hi = _check_parameter("Hi", Hi)
        self.Y = _check_parameter("Y", Y)
        self.expD = _check_parameter("expD", expD)

    def get_yield_stress(self, kappa: float) -> float:
        """
        获取当前屈服应力

        Args:
            kappa: 累积塑性应变

        Returns:
            σ_y(κ)
        """
        return self.yield_stress + self.Hi * kappa + self.Y * (1.0 - np.exp(-self.expD * kappa))

    def get_hardening_modulus(self, kappa: float) -> float:
        """
        获取硬化模量 dσ_y/dκ

        Args:
            kappa: 累积塑性应变

        Returns:
            σ_y'(κ)
        """
        return self.Hi + self.Y * self.expD * np.exp(-self.expD * kappa)

    def __repr__(self) -> str:
        return (
            f"IsotropicHardening(σ0={self.yield_stress:.2e}, Hi={self.Hi:.2e}, "
            f"Y={self.Y:.2e}, expD={self.expD:.2e})"
        )


class KinematicHardening:
    """
    线性随动硬化

    背应力模量 H_k(κ) = Hk·κ，背应力沿流动方向演化:
        α_new = α_old + √(2/3)·(H_k(κ_new) - H_k(κ_old))·n
    """

    def __init__(self, Hk: float = 0.0):
        """
        Args:
            Hk: 随动硬化模量 (>= 0)
        """
        self.Hk = _check_parameter("Hk", Hk)

    def get_back_stress_modulus(self, kappa: float) -> float:
        """H_k(κ)"""
        return self.Hk * kappa

    def get_back_stress_modulus_prime(self, kappa: float) -> float:
        """dH_k/dκ"""
        return self.Hk

    def update_back_stress(
        self,
        back_stress_old: np.ndarray,
        kappa_old: float,
        kappa_new: float,
        n: np.ndarray
    ) -> np.ndarray:
        """
        更新背应力

        Args:
            back_stress_old: 旧背应力约化向量
            kappa_old: 步初累积塑性应变
            kappa_new: 步末累积塑性应变
            n: 单位流动方向 (应力分量形式)

        Returns:
            更新后的背应力
        """
        increment = self.get_back_stress_modulus(kappa_new) - self.get_back_stress_modulus(kappa_old)
        return back_stress_old + np.sqrt(2.0 / 3.0) * increment * n

    def __repr__(self) -> str:
        return f"KinematicHardening(Hk={self.Hk:.2e})"
