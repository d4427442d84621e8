# 文件: PyMises/mises/materials/plastic/return_mapping.py
"""
返回映射算法模块

提供塑性修正算法:
- RadialReturn: 径向返回算法 (J2 塑性，平面应变 / 三维)
- UniaxialReturn: 单轴应力返回算法 (一维)

两者共用有界 Newton 迭代 newton_solve，迭代结果以 ConvergenceResult 报告，
未收敛时抛出 LocalConvergenceError，调用方的临时状态保持不变。
"""

import logging
from dataclasses import dataclass
from typing import Callable, NamedTuple, Optional, Tuple

import numpy as np

from ..errors import LocalConvergenceError, MaterialConfigurationError
from ..interfaces import MaterialMode
from .. import tensors

LOG = logging.getLogger(__name__)

SQRT_2_3 = np.sqrt(2.0 / 3.0)


class ConvergenceResult(NamedTuple):
    """局部 Newton 迭代的结果"""
    converged: bool
    iterations: int
    residual: float


@dataclass
class ReturnMappingResult:
    """
    返回映射结果

    Attributes:
        trial_norm: 试探相对偏应力范数 ‖ξ_trial‖
        normal: 单位流动方向 n (弹性步为零向量)
        d_kappa: 塑性乘子 Δκ (弹性步为 0)
        kappa: 更新后的累积塑性应变
        convergence: Newton 迭代结果 (弹性步为 None)
    """
    trial_norm: float
    normal: np.ndarray
    d_kappa: float
    kappa: float
    convergence: Optional[ConvergenceResult] = None

    @property
    def is_plastic(self) -> bool:
        return self.d_kappa > 0.0


def newton_solve(
    residual: Callable[[float], Tuple[float, float]],
    tolerance: float,
    max_iter: int,
    scale: float = 0.0,
    rtol: float = 0.0
) -> Tuple[float, ConvergenceResult]:
    """
    标量 Newton 迭代，初值 0

    收敛判据: |g| < max(tolerance, rtol * scale)

    注意: 相对项使判据不再是纯绝对判据 |g| < tolerance。
    ‖ξ_trial‖ 超过 tolerance / rtol (默认 100) 时允许的残量随之放大；
    需要纯绝对判据时传入 rtol=0。

    Args:
        residual: 返回 (g, dg/dx) 的函数
        tolerance: 绝对容差
        max_iter: 最大迭代次数
        scale: 相对容差的参考量 (如 ‖ξ_trial‖)
        rtol: 相对容差

    Returns:
        x: 根
        result: ConvergenceResult

    Raises:
        LocalConvergenceError: 达到最大迭代次数仍未收敛
    """
    limit = max(tolerance, rtol * scale)
    x = 0.0
    g = 0.0
    for iteration in range(max_iter + 1):
        g, dg = residual(x)
        if abs(g) < limit:
            return x, ConvergenceResult(True, iteration, abs(g))
        if iteration < max_iter:
            x -= g / dg
    raise LocalConvergenceError(ConvergenceResult(False, max_iter, abs(g)))


class RadialReturn:
    """
    径向返回算法 (Radial Return Algorithm)

    适用于 J2 (Von Mises) 塑性的经典返回映射算法。
    由于 J2 屈服面是球形，返回路径为径向（直线），故名径向返回。

    算法步骤:
    1. 弹性预测: ξ_trial = 2G·dev(ε - ε_p) - α，平均应力 K·tr(ε)
    2. 检查屈服条件 f = ‖ξ_trial‖ - √(2/3)·σ_y(κ)
    3. 若 f > 0，以 Newton 迭代求解 Δκ:
       g(Δκ) = -√(2/3)σ_y(κ+√(2/3)Δκ) + ‖ξ_trial‖ - 2GΔκ
               - √(2/3)(H_k(κ+√(2/3)Δκ) - H_k(κ))
    4. 更新: κ_new = κ + √(2/3)Δκ，n = ξ_trial / ‖ξ_trial‖

    有限变形模型以有效剪切模量 Ḡ 代替 G 调用同一求解器。

    Attributes:
        elastic: 弹性模型 (需提供 mu, K, stiffness_matrix)
        yield_fn: 屈服函数 (需提供 evaluate, gradient, norm)
        hardening: 等向硬化律 (需提供 get_yield_stress, get_hardening_modulus)
        kinematic: 随动硬化律 (需提供 get_back_stress_modulus 等)
        tolerance: Newton 绝对容差
        rtol: Newton 相对容差 (相对于 ‖ξ_trial‖)
        max_iter: 最大迭代次数

    Example:
        return_mapping = RadialReturn(elastic, yield_fn, hardening, kinematic)
        xi_trial, mean_stress = return_mapping.predict(strain, ep, alpha, mode)
        result = return_mapping.apply(xi_trial, kappa, mode)
    """

    def __init__(
        self,
        elastic,
        yield_fn,
        hardening,
        kinematic,
        tolerance: float = 1e-10,
        rtol: float = 1e-12,
        max_iter: int = 50
    ):
        if tolerance <= 0 or rtol < 0:
            raise MaterialConfigurationError(
                f"Invalid Newton tolerances: tolerance={tolerance}, rtol={rtol}"
            )
        if max_iter < 1:
            raise MaterialConfigurationError(f"max_iter must be at least 1, got {max_iter}")
        self.elastic = elastic
        self.yield_fn = yield_fn
        self.hardening = hardening
        self.kinematic = kinematic
        self.tolerance = float(tolerance)
        self.rtol = float(rtol)
        self.max_iter = int(max_iter)

    def predict(
        self,
        strain: np.ndarray,
        plastic_strain: np.ndarray,
        back_stress: np.ndarray,
        mode: MaterialMode
    ) -> Tuple[np.ndarray, float]:
        """
        弹性预测 (纯函数)

        Args:
            strain: 总应变 (工程形式)
            plastic_strain: 已提交塑性应变 (工程形式)
            back_stress: 已提交背应力 (应力分量形式)
            mode: 材料模式

        Returns:
            xi_trial: 试探相对偏应力 ξ_trial = 2G·dev(ε_e) - α
            mean_stress: 平均应力 3K·ε_vol
        """
        strain_dev, strain_vol = tensors.deviatoric_volumetric_split(strain - plastic_strain, mode)
        xi_trial = tensors.apply_deviatoric_stiffness(strain_dev, self.elastic.mu, mode) - back_stress
        return xi_trial, 3.0 * self.elastic.K * strain_vol

    def residual(self, d_kappa: float, trial_norm: float, kappa: float, shear_modulus: float) -> Tuple[float, float]:
        """一致性条件残量 g(Δκ) 及其导数 dg/dΔκ"""
        kappa_new = kappa + SQRT_2_3 * d_kappa
        hk_increment = (
            self.kinematic.get_back_stress_modulus(kappa_new)
            - self.kinematic.get_back_stress_modulus(kappa)
        )
        g = (
            -SQRT_2_3 * self.hardening.get_yield_stress(kappa_new)
            + trial_norm
            - 2.0 * shear_modulus * d_kappa
            - SQRT_2_3 * hk_increment
        )
        dg = -2.0 * shear_modulus - 2.0 / 3.0 * (
            self.kinematic.get_back_stress_modulus_prime(kappa_new)
            + self.hardening.get_hardening_modulus(kappa_new)
        )
        return g, dg

    def solve_multiplier(self, trial_norm: float, kappa: float, shear_modulus: float) -> Tuple[float, ConvergenceResult]:
        """
        求解塑性乘子 Δκ

        Raises:
            LocalConvergenceError: Newton 迭代未收敛
        """
        d_kappa, result = newton_solve(
            lambda x: self.residual(x, trial_norm, kappa, shear_modulus),
            self.tolerance,
            self.max_iter,
            scale=trial_norm,
            rtol=self.rtol,
        )
        LOG.debug("Radial return converged in %d iterations (|g| = %.3e)", result.iterations, result.residual)
        return d_kappa, result

    def apply(
        self,
        xi_trial: np.ndarray,
        kappa: float,
        mode: MaterialMode,
        shear_modulus: Optional[float] = None
    ) -> ReturnMappingResult:
        """
        执行返回映射

        Args:
            xi_trial: 试探相对偏应力
            kappa: 已提交累积塑性应变
            mode: 材料模式
            shear_modulus: 残量中使用的剪切模量 (默认 G，有限变形传入 Ḡ)

        Returns:
            ReturnMappingResult
        """
        if shear_modulus is None:
            shear_modulus = self.elastic.mu

        trial_norm = self.yield_fn.norm(xi_trial, mode)
        f_trial = self.yield_fn.evaluate(xi_trial, self.hardening.get_yield_stress(kappa), mode)

        if f_trial <= 0:
            return ReturnMappingResult(trial_norm, np.zeros_like(xi_trial), 0.0, kappa)

        d_kappa, convergence = self.solve_multiplier(trial_norm, kappa, shear_modulus)
        return ReturnMappingResult(
            trial_norm=trial_norm,
            normal=self.yield_fn.gradient(xi_trial, mode),
            d_kappa=d_kappa,
            kappa=kappa + SQRT_2_3 * d_kappa,
            convergence=convergence,
        )

    def consistent_tangent(
        self,
        mode: MaterialMode,
        d_kappa: float,
        trial_norm: float,
        normal: np.ndarray,
        kappa_new: float
    ) -> np.ndarray:
        """
        计算算法一致切线模量

        D = K δ⊗δ + 2Gφ P_dev - 2Gφ̄ n⊗n

        其中:
        φ = 1 - 2GΔκ / ‖ξ_trial‖            (径向回缩导致的刚度降低)
        φ̄ = 3G / (3G + H') - 1 + φ          (塑性流动导致的刚度降低)
        H' = σ_y'(κ_new) + H_k'(κ_new)

        Δκ <= 0 时返回弹性矩阵。
        """
        D = self.elastic.stiffness_matrix(mode)
        if d_kappa <= 0.0 or trial_norm == 0.0:
            return D

        G = self.elastic.mu
        H = self.hardening.get_hardening_modulus(kappa_new) + self.kinematic.get_back_stress_modulus_prime(kappa_new)
        phi = 1.0 - 2.0 * G * d_kappa / trial_norm
        phi_bar = 3.0 * G / (3.0 * G + H) - 1.0 + phi

        delta = tensors.delta_vector(mode)
        return (
            self.elastic.K * np.outer(delta, delta)
            + 2.0 * G * phi * tensors.deviatoric_projector(mode)
            - 2.0 * G * phi_bar * np.outer(normal, normal)
        )

    def __repr__(self) -> str:
        return (
            f"RadialReturn(elastic={self.elastic}, yield_fn={self.yield_fn}, "
            f"hardening={self.hardening}, kinematic={self.kinematic})"
        )


class UniaxialReturn:
    """
    单轴应力返回映射 (一维)

    E = 9KG / (3K + G)
    ξ_trial = E(ε - ε_p) - α，f = |ξ_trial| - σ_y(κ)
    g(Δκ) = |ξ_trial| - EΔκ - σ_y(κ+Δκ) - (H_k(κ+Δκ) - H_k(κ))
    一致切线: E·H / (E + H)，H = σ_y'(κ_new) + H_k'
    """

    def __init__(self, elastic, hardening, kinematic, tolerance: float = 1e-10, rtol: float = 1e-12, max_iter: int = 50):
        self.elastic = elastic
        self.hardening = hardening
        self.kinematic = kinematic
        self.tolerance = float(tolerance)
        self.rtol = float(rtol)
        self.max_iter = int(max_iter)

    def predict(self, strain: np.ndarray, plastic_strain: np.ndarray, back_stress: np.ndarray) -> np.ndarray:
        """试探相对应力 ξ_trial"""
        return self.elastic.E * (strain - plastic_strain) - back_stress

    def residual(self, d_kappa: float, trial_norm: float, kappa: float) -> Tuple[float, float]:
        E = self.elastic.E
        kappa_new = kappa + d_kappa
        hk_increment = (
            self.kinematic.get_back_stress_modulus(kappa_new)
            - self.kinematic.get_back_stress_modulus(kappa)
        )
        g = trial_norm - E * d_kappa - self.hardening.get_yield_stress(kappa_new) - hk_increment
        dg = -E - self.hardening.get_hardening_modulus(kappa_new) - self.kinematic.get_back_stress_modulus_prime(kappa_new)
        return g, dg

    def apply(self, xi_trial: np.ndarray, kappa: float) -> ReturnMappingResult:
        trial_norm = float(abs(xi_trial[0]))
        if trial_norm - self.hardening.get_yield_stress(kappa) <= 0:
            return ReturnMappingResult(trial_norm, np.zeros(1), 0.0, kappa)

        d_kappa, convergence = newton_solve(
            lambda x: self.residual(x, trial_norm, kappa),
            self.tolerance,
            self.max_iter,
            scale=trial_norm,
            rtol=self.rtol,
        )
        LOG.debug("Uniaxial return converged in %d iterations", convergence.iterations)
        return ReturnMappingResult(
            trial_norm=trial_norm,
            normal=np.sign(xi_trial),
            d_kappa=d_kappa,
            kappa=kappa + d_kappa,
            convergence=convergence,
        )

    def consistent_tangent(self, d_kappa: float, kappa_new: float) -> np.ndarray:
        E = self.elastic.E
        if d_kappa <= 0.0:
            return np.array([[E]])
        H = self.hardening.get_hardening_modulus(kappa_new) + self.kinematic.get_back_stress_modulus_prime(kappa_new)
        return np.array([[E * H / (E + H)]])

    def __repr__(self) -> str:
        return f"UniaxialReturn(E={self.elastic.E:.2e}, hardening={self.hardening})"
