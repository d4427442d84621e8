# 文件: PyMises/mises/materials/elastic/isotropic.py
"""
各向同性弹性模型

提供:
- IsotropicElastic: 各向同性线弹性 (Hooke's Law)，以剪切模量 G 与体积模量 K 参数化
"""

import numpy as np
from typing import Tuple

from ..errors import MaterialConfigurationError, UnsupportedMaterialModeError
from ..interfaces import MaterialMode
from .. import tensors


class IsotropicElastic:
    """
    各向同性线弹性模型 (Hooke's Law)

    本构关系: σ = K tr(ε) I + 2G dev(ε)

    约化形式的弹性矩阵:
        D = K δ⊗δ + 2G P_dev
    其中 P_dev 为偏量投影矩阵 (剪切对角项为 1/2)。
    一维模式 (单轴应力) 退化为 D = [E]。

    Attributes:
        mu: 剪切模量 G
        K: 体积模量 K
        E: 杨氏模量 E = 9KG / (3K + G)
        nu: 泊松比 ν = (3K - 2G) / (2(3K + G))

    Example:
        elastic = IsotropicElastic(G=80e3, K=170e3)
        stress, tangent = elastic.compute_stress(strain, MaterialMode.THREE_D)
    """

    def __init__(self, G: float, K: float):
        """
        Args:
            G: 剪切模量 (> 0)
            K: 体积模量 (> 0)

        Raises:
            MaterialConfigurationError: 模量非正或非有限值
        """
        for name, value in (("G", G), ("K", K)):
            if not np.isfinite(value) or value <= 0:
                raise MaterialConfigurationError(
                    f"{name} must be finite and positive, got {value}"
                )
        self._mu = float(G)
        self._K = float(K)

    @classmethod
    def from_engineering_constants(cls, E: float, nu: float) -> 'IsotropicElastic':
        """
        由杨氏模量与泊松比创建

        Raises:
            MaterialConfigurationError: 当泊松比超出有效范围时
        """
        if not (-1.0 < nu < 0.5):
            raise MaterialConfigurationError(f"Poisson's ratio must be in (-1, 0.5), got {nu}")
        return cls(G=E / (2 * (1 + nu)), K=E / (3 * (1 - 2 * nu)))

    @property
    def mu(self) -> float:
        """剪切模量 G"""
        return self._mu

    @property
    def K(self) -> float:
        """体积模量 K"""
        return self._K

    @property
    def E(self) -> float:
        """杨氏模量"""
        return 9.0 * self._K * self._mu / (3.0 * self._K + self._mu)

    @property
    def nu(self) -> float:
        """泊松比"""
        return (3.0 * self._K - 2.0 * self._mu) / (2.0 * (3.0 * self._K + self._mu))

    def stiffness_matrix(self, mode: MaterialMode) -> np.ndarray:
        """
        约化弹性矩阵

        Raises:
            UnsupportedMaterialModeError: 平面应力模式
        """
        if mode == MaterialMode.ONE_D:
            return np.array([[self.E]])
        if mode == MaterialMode.PLANE_STRESS:
            raise UnsupportedMaterialModeError("Plane stress stiffness is not provided")
        delta = tensors.delta_vector(mode)
        return self._K * np.outer(delta, delta) + 2.0 * self._mu * tensors.deviatoric_projector(mode)

    def compute_stress(self, strain: np.ndarray, mode: MaterialMode) -> Tuple[np.ndarray, np.ndarray]:
        """
        计算弹性应力

        Args:
            strain: 工程应变约化向量
            mode: 材料模式

        Returns:
            stress: 应力约化向量
            tangent: 切线模量 (等于弹性矩阵)
        """
        D = self.stiffness_matrix(mode)
        return D @ strain, D

    def __repr__(self) -> str:
        return f"IsotropicElastic(G={self._mu:.3e}, K={self._K:.3e})"
