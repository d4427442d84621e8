# 文件: PyMises/mises/materials/interfaces.py
"""
材料系统核心接口定义

设计原则:
1. Material: 所有材料的抽象基类，定义统一的 evaluate_stress / evaluate_tangent 接口
2. StressResult: 标准化的应力计算返回值
3. MaterialMode / Capability: 用能力集合代替类型判断，按标签查询材料是否支持某种响应
4. Protocol: 组件接口，使用鸭子类型实现松耦合
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, Literal, Optional, Protocol, runtime_checkable
import numpy as np

from .errors import MaterialConfigurationError, UnsupportedMaterialModeError


class Capability(Enum):
    """材料能力标签"""

    STRESS_1D = "1d"
    STRESS_PLANE_STRAIN = "plane_strain"
    STRESS_PLANE_STRESS = "plane_stress"
    STRESS_3D = "3d"
    SMALL_STRAIN = "small_strain"
    FINITE_STRAIN = "finite_strain"
    CONSISTENT_TANGENT = "consistent_tangent"


class MaterialMode(Enum):
    """
    材料模式 (应力空间)

    决定约化向量的分量个数:
    - ONE_D:         [xx]                          (1)
    - PLANE_STRAIN:  [xx, yy, zz, xy]              (4)
    - PLANE_STRESS:  [xx, yy, xy]                  (3)
    - THREE_D:       [xx, yy, zz, yz, xz, xy]      (6)
    """

    ONE_D = "1d"
    PLANE_STRAIN = "plane_strain"
    PLANE_STRESS = "plane_stress"
    THREE_D = "3d"

    @property
    def size(self) -> int:
        return _MODE_SIZES[self]

    @property
    def capability(self) -> Capability:
        return _MODE_CAPABILITIES[self]


_MODE_SIZES = {
    MaterialMode.ONE_D: 1,
    MaterialMode.PLANE_STRAIN: 4,
    MaterialMode.PLANE_STRESS: 3,
    MaterialMode.THREE_D: 6,
}

_MODE_CAPABILITIES = {
    MaterialMode.ONE_D: Capability.STRESS_1D,
    MaterialMode.PLANE_STRAIN: Capability.STRESS_PLANE_STRAIN,
    MaterialMode.PLANE_STRESS: Capability.STRESS_PLANE_STRESS,
    MaterialMode.THREE_D: Capability.STRESS_3D,
}


class TangentMode(Enum):
    """
    刚度类型

    - ELASTIC: 初始弹性刚度
    - TANGENT: 算法一致切线刚度
    """

    ELASTIC = "elastic"
    TANGENT = "tangent"


@dataclass
class StressResult:
    """
    统一的应力计算结果

    Attributes:
        stress: 应力约化向量 (小变形: 柯西应力; 有限变形: 第一类 P-K 应力)
        tangent: 切线模量
        state: 更新后的材料状态 (用于塑性历史跟踪)
        is_plastic: 是否发生塑性变形
        stress_type: 应力类型 ('cauchy', 'pk1', 'kirchhoff')
    """
    stress: np.ndarray
    tangent: np.ndarray
    state: Optional[object] = None
    is_plastic: bool = False
    stress_type: Literal['cauchy', 'pk1', 'kirchhoff'] = 'cauchy'


class Material(ABC):
    """
    材料抽象基类

    所有材料都必须实现:
    - evaluate_stress(): 在试探句柄上计算应力并写入临时状态
    - evaluate_tangent(): 由同一试探状态计算切线刚度
    - create_state(): 创建积分点的初始状态
    - capabilities: 支持的能力集合
    - stress_type: 返回的应力类型

    Example:
        mat = MisesMaterial(G=80e3, K=170e3, yield_stress=200.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        handle = point.begin_trial()
        stress = mat.evaluate_stress(strain, handle)
        D = mat.evaluate_tangent(TangentMode.TANGENT, handle)
        point.commit(handle)
    """

    @abstractmethod
    def evaluate_stress(self, gradient: np.ndarray, handle) -> np.ndarray:
        """
        计算应力

        Args:
            gradient: 总应变约化向量 (小变形) 或变形梯度向量 (有限变形)
            handle: 试探状态句柄 (TrialHandle)，结果写入其临时状态

        Returns:
            应力约化向量
        """
        pass

    @abstractmethod
    def evaluate_tangent(self, mode: TangentMode, handle) -> np.ndarray:
        """
        计算切线刚度

        Args:
            mode: TangentMode.ELASTIC 或 TangentMode.TANGENT
            handle: 已完成 evaluate_stress 的试探句柄

        Returns:
            切线刚度矩阵
        """
        pass

    @abstractmethod
    def create_state(self, mode: MaterialMode):
        """创建初始材料状态 (PlasticState)"""
        pass

    @abstractmethod
    def committed_gradient(self, state) -> np.ndarray:
        """返回已提交状态中的总应变 (或变形梯度) 约化向量"""
        pass

    @property
    @abstractmethod
    def capabilities(self) -> FrozenSet[Capability]:
        """支持的能力集合"""
        pass

    @property
    @abstractmethod
    def stress_type(self) -> Literal['cauchy', 'pk1', 'kirchhoff']:
        """
        返回应力类型

        - 'cauchy': 柯西应力 (小变形)
        - 'pk1': 第一类 Piola-Kirchhoff 应力 (有限变形)
        - 'kirchhoff': Kirchhoff 应力 τ = J * σ
        """
        pass

    def has_capability(self, capability: Capability) -> bool:
        return capability in self.capabilities

    def check_mode(self, mode: MaterialMode) -> None:
        """模式不受支持时立即失败，不修改任何状态"""
        if not self.has_capability(mode.capability):
            raise UnsupportedMaterialModeError(
                f"{self.__class__.__name__} does not support material mode '{mode.value}'"
            )

    def compute_stress(self, gradient: np.ndarray, state, tangent_mode: TangentMode = TangentMode.TANGENT) -> StressResult:
        """
        不可变风格的便捷接口

        以 state 为已提交状态开启一次试探，计算应力与切线，
        返回包含新状态的 StressResult；输入 state 不会被修改。
        """
        from .state import MaterialPoint

        point = MaterialPoint(state.copy())
        handle = point.begin_trial()
        stress = self.evaluate_stress(gradient, handle)
        tangent = self.evaluate_tangent(tangent_mode, handle)
        is_plastic = handle.state.kappa > state.kappa
        point.commit(handle)

        return StressResult(
            stress=stress,
            tangent=tangent,
            state=point.committed,
            is_plastic=is_plastic,
            stress_type=self.stress_type,
        )


def require_capability(material: Material, capability: Capability) -> None:
    """
    检查材料能力

    Raises:
        MaterialConfigurationError: 材料不具备所需能力
    """
    if not material.has_capability(capability):
        raise MaterialConfigurationError(
            f"Material {material!r} does not provide capability '{capability.value}'"
        )


# =============================================================================
# 组件协议 (Protocol for duck typing)
# =============================================================================

@runtime_checkable
class ElasticModel(Protocol):
    """
    弹性模型协议

    - mu: 剪切模量
    - K: 体积模量
    - stiffness_matrix(mode): 弹性矩阵
    """

    @property
    def mu(self) -> float:
        ...

    @property
    def K(self) -> float:
        ...

    def stiffness_matrix(self, mode: MaterialMode) -> np.ndarray:
        ...


@runtime_checkable
class HardeningLaw(Protocol):
    """
    等向硬化律协议

    - get_yield_stress(): 当前屈服应力 σ_y(κ)
    - get_hardening_modulus(): 硬化模量 dσ_y/dκ
    """

    def get_yield_stress(self, kappa: float) -> float:
        ...

    def get_hardening_modulus(self, kappa: float) -> float:
        ...


@runtime_checkable
class KinematicLaw(Protocol):
    """
    随动硬化律协议

    - get_back_stress_modulus(): H_k(κ)
    - get_back_stress_modulus_prime(): dH_k/dκ
    """

    def get_back_stress_modulus(self, kappa: float) -> float:
        ...

    def get_back_stress_modulus_prime(self, kappa: float) -> float:
        ...
