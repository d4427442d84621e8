# 文件: PyMises/mises/materials/factory.py
"""
材料工厂模块

提供统一的材料创建入口。
"""

from typing import Any, Dict, Tuple

from .errors import MaterialConfigurationError
from .interfaces import Material
from .elastic.isotropic import IsotropicElastic
from .models.j2_plasticity import MisesMaterial
from .models.finite_strain import FiniteStrainMisesMaterial


# 纯弹性材料的屈服应力 (实际上永远不会屈服)
ELASTIC_YIELD_STRESS = 1e30

_PLASTIC_KEYS = ('yield_stress', 'Hi', 'Y', 'expD', 'Hk')
_SOLVER_KEYS = ('tolerance', 'rtol', 'max_iter')


class MaterialFactory:
    """
    材料工厂

    根据材料属性字典创建对应的材料对象。
    提供便捷的工厂方法简化常见材料的创建。

    Example:
        # 从属性字典创建
        mat = MaterialFactory.create('Steel', {
            'E': 210e3,
            'nu': 0.3,
            'plastic': {'yield_stress': 250.0, 'Hi': 1000.0},
            'kinematics': 'finite',
        })

        # 使用便捷方法
        mat = MaterialFactory.create_elastic(G=80e3, K=170e3)
        mat = MaterialFactory.create_mises(G=80e3, K=170e3, yield_stress=200.0)
    """

    @staticmethod
    def _elastic_constants(name: str, props: Dict[str, Any]) -> Tuple[float, float]:
        if props.get('G') is not None and props.get('K') is not None:
            return float(props['G']), float(props['K'])
        if props.get('E') is not None and props.get('nu') is not None:
            elastic = IsotropicElastic.from_engineering_constants(float(props['E']), float(props['nu']))
            return elastic.mu, elastic.K
        raise MaterialConfigurationError(
            f"Material '{name}' missing elastic constants. "
            f"Provide either 'G' and 'K' or 'E' and 'nu'"
        )

    @staticmethod
    def create(name: str, props: Dict[str, Any]) -> Material:
        """
        根据属性字典创建材料

        Args:
            name: 材料名称 (用于错误消息)
            props: 材料属性字典，结构:
                {
                    'G': float, 'K': float,   # 或 'E': float, 'nu': float
                    'plastic': {              # 塑性参数 (可选)
                        'yield_stress': float,
                        'Hi': float,          # 默认 0
                        'Y': float,           # 默认 0
                        'expD': float,        # 默认 0
                        'Hk': float,          # 默认 0
                    },
                    'kinematics': 'small' | 'finite',   # 默认 'small'
                    'solver': {'tolerance', 'rtol', 'max_iter'}   # 可选
                }

        Returns:
            Material: 材料对象

        Raises:
            MaterialConfigurationError: 缺少必需参数或参数非法
        """
        G, K = MaterialFactory._elastic_constants(name, props)

        kinematics = props.get('kinematics', 'small')
        if kinematics == 'small':
            cls = MisesMaterial
        elif kinematics == 'finite':
            cls = FiniteStrainMisesMaterial
        else:
            raise MaterialConfigurationError(
                f"Material '{name}' has unknown kinematics '{kinematics}'"
            )

        solver = props.get('solver', {})
        unknown = set(solver) - set(_SOLVER_KEYS)
        if unknown:
            raise MaterialConfigurationError(
                f"Material '{name}' has unknown solver settings: {sorted(unknown)}"
            )

        plastic = props.get('plastic')
        if plastic is None:
            # 纯弹性材料：使用无限大屈服应力
            return cls(G=G, K=K, yield_stress=ELASTIC_YIELD_STRESS, **solver)

        if plastic.get('yield_stress') is None:
            raise MaterialConfigurationError(
                f"Material '{name}' has plastic section but missing 'yield_stress'"
            )
        unknown = set(plastic) - set(_PLASTIC_KEYS)
        if unknown:
            raise MaterialConfigurationError(
                f"Material '{name}' has unknown plastic parameters: {sorted(unknown)}"
            )
        return cls(G=G, K=K, **{key: float(value) for key, value in plastic.items()}, **solver)

    @staticmethod
    def create_elastic(G: float, K: float) -> MisesMaterial:
        """
        创建纯弹性材料

        Returns:
            MisesMaterial: 设置为纯弹性响应
        """
        return MisesMaterial(G=G, K=K, yield_stress=ELASTIC_YIELD_STRESS)

    @staticmethod
    def create_mises(
        G: float,
        K: float,
        yield_stress: float,
        Hi: float = 0.0,
        Y: float = 0.0,
        expD: float = 0.0,
        Hk: float = 0.0
    ) -> MisesMaterial:
        """创建小变形 J2 弹塑性材料"""
        return MisesMaterial(G=G, K=K, yield_stress=yield_stress, Hi=Hi, Y=Y, expD=expD, Hk=Hk)

    @staticmethod
    def create_finite_strain_mises(
        G: float,
        K: float,
        yield_stress: float,
        Hi: float = 0.0,
        Y: float = 0.0,
        expD: float = 0.0,
        Hk: float = 0.0
    ) -> FiniteStrainMisesMaterial:
        """创建有限变形 J2 弹塑性材料"""
        return FiniteStrainMisesMaterial(G=G, K=K, yield_stress=yield_stress, Hi=Hi, Y=Y, expD=expD, Hk=Hk)
