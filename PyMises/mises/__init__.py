# 文件: PyMises/mises/__init__.py
"""
PyMises 核心模块

导出材料、积分点状态管理、应变路径驱动等核心类
"""

# ==============================================================================
# 材料系统
# ==============================================================================
from mises.materials import (
    # 异常
    MaterialError,
    UnsupportedMaterialModeError,
    LocalConvergenceError,
    MaterialConfigurationError,
    InvalidDeformationError,
    TrialStateError,

    # 核心接口
    Capability,
    MaterialMode,
    TangentMode,
    Material,
    StressResult,
    require_capability,

    # 状态
    PlasticState,
    MaterialPoint,
    TrialHandle,

    # 工厂
    MaterialFactory,

    # 预置模型
    MisesMaterial,
    FiniteStrainMisesMaterial,
)

# ==============================================================================
# 积分点层
# ==============================================================================
from mises.integration import PointStore, StrainPathDriver


__all__ = [
    # === 异常 ===
    'MaterialError',
    'UnsupportedMaterialModeError',
    'LocalConvergenceError',
    'MaterialConfigurationError',
    'InvalidDeformationError',
    'TrialStateError',

    # === 材料系统 ===
    'Capability',
    'MaterialMode',
    'TangentMode',
    'Material',
    'StressResult',
    'require_capability',
    'PlasticState',
    'MaterialPoint',
    'TrialHandle',
    'MaterialFactory',
    'MisesMaterial',
    'FiniteStrainMisesMaterial',

    # === 积分点层 ===
    'PointStore',
    'StrainPathDriver',
]
