# 文件: PyMises/mises/materials/__init__.py
"""
PyMises 材料系统

分层架构:
- errors.py: 异常层次
- interfaces.py: 抽象基类、材料模式、能力标签和协议
- tensors.py: 约化向量与四阶张量运算
- state.py: 材料状态与两阶段提交 (begin_trial / commit / discard)
- elastic/: 弹性模型组件
- plastic/: 塑性模型组件 (屈服函数、硬化规律、返回映射)
- models/: 预置材料模型 (小变形 / 有限变形 J2)
- factory.py: 材料工厂

使用方法:
    from mises.materials import MaterialFactory, MaterialPoint, MaterialMode, TangentMode

    # 创建材料
    mat = MaterialFactory.create_mises(G=80e3, K=170e3, yield_stress=200.0, Hi=1000.0)

    # 创建积分点
    point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))

    # 计算应力
    handle = point.begin_trial()
    stress = mat.evaluate_stress(strain, handle)
    D = mat.evaluate_tangent(TangentMode.TANGENT, handle)
    point.commit(handle)

扩展指南:
    添加新硬化模型:
        1. 在 plastic/hardening.py 添加新类
        2. 实现 get_yield_stress() 和 get_hardening_modulus() 方法

    添加新材料模型:
        1. 在 models/ 目录添加新文件
        2. 继承 Material 基类，实现 evaluate_stress()、evaluate_tangent() 和 create_state()
"""

# 异常
from .errors import (
    MaterialError,
    UnsupportedMaterialModeError,
    LocalConvergenceError,
    MaterialConfigurationError,
    InvalidDeformationError,
    TrialStateError,
)

# 核心接口
from .interfaces import (
    Capability,
    MaterialMode,
    TangentMode,
    Material,
    StressResult,
    ElasticModel,
    HardeningLaw,
    KinematicLaw,
    require_capability,
)

# 状态管理
from .state import PlasticState, MaterialPoint, TrialHandle, begin_trial, commit, discard

# 工厂
from .factory import MaterialFactory

# 弹性组件
from .elastic import IsotropicElastic

# 塑性组件
from .plastic import (
    VonMises,
    IsotropicHardening,
    KinematicHardening,
    ConvergenceResult,
    RadialReturn,
    UniaxialReturn,
)

# 预置模型
from .models import MisesMaterial, FiniteStrainMisesMaterial


__all__ = [
    # 异常
    'MaterialError',
    'UnsupportedMaterialModeError',
    'LocalConvergenceError',
    'MaterialConfigurationError',
    'InvalidDeformationError',
    'TrialStateError',

    # 核心接口
    'Capability',
    'MaterialMode',
    'TangentMode',
    'Material',
    'StressResult',
    'ElasticModel',
    'HardeningLaw',
    'KinematicLaw',
    'require_capability',

    # 状态
    'PlasticState',
    'MaterialPoint',
    'TrialHandle',
    'begin_trial',
    'commit',
    'discard',

    # 工厂
    'MaterialFactory',

    # 弹性组件
    'IsotropicElastic',

    # 塑性组件
    'VonMises',
    'IsotropicHardening',
    'KinematicHardening',
    'ConvergenceResult',
    'RadialReturn',
    'UniaxialReturn',

    # 预置模型
    'MisesMaterial',
    'FiniteStrainMisesMaterial',
]
