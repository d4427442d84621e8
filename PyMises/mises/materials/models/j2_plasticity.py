# 文件: PyMises/mises/materials/models/j2_plasticity.py
"""
J2 弹塑性材料模型 (小变形)

使用组合模式将弹性模型、屈服函数、硬化规律和返回映射算法组合成完整的材料。
"""

from typing import FrozenSet

import numpy as np

from ..interfaces import Capability, Material, MaterialMode, TangentMode
from ..state import PlasticState, TrialHandle
from ..elastic.isotropic import IsotropicElastic
from ..plastic.yield_functions import VonMises
from ..plastic.hardening import IsotropicHardening, KinematicHardening
from ..plastic.return_mapping import RadialReturn, UniaxialReturn
from .. import tensors


class MisesMaterial(Material):
    """
    J2 弹塑性材料 (组合式实现)

    将各组件组合成完整的材料模型:
    - 弹性: IsotropicElastic (G, K)
    - 屈服: VonMises
    - 硬化: IsotropicHardening (线性 + 饱和) 与 KinematicHardening (线性随动)
    - 返回映射: RadialReturn (平面应变/三维)，UniaxialReturn (一维)

    支持一维、平面应变、三维模式；平面应力不支持。

    Attributes:
        elastic: 弹性组件
        hardening: 等向硬化组件
        kinematic: 随动硬化组件
        return_mapping: 径向返回算法

    Example:
        mat = MisesMaterial(G=80e3, K=170e3, yield_stress=200.0, Hi=1000.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        handle = point.begin_trial()
        stress = mat.evaluate_stress(strain, handle)
        D = mat.evaluate_tangent(TangentMode.TANGENT, handle)
        point.commit(handle)
    """

    _capabilities = frozenset({
        Capability.STRESS_1D,
        Capability.STRESS_PLANE_STRAIN,
        Capability.STRESS_3D,
        Capability.SMALL_STRAIN,
        Capability.CONSISTENT_TANGENT,
    })

    def __init__(
        self,
        G: float,
        K: float,
        yield_stress: float,
        Hi: float = 0.0,
        Y: float = 0.0,
        expD: float = 0.0,
        Hk: float = 0.0,
        tolerance: float = 1e-10,
        rtol: float = 1e-12,
        max_iter: int = 50
    ):
        """
        Args:
            G: 剪切模量
            K: 体积模量
            yield_stress: 初始屈服应力 σ0
            Hi: 线性等向硬化模量
            Y: 饱和硬化幅值
            expD: 饱和速率
            Hk: 线性随动硬化模量
            tolerance: 局部 Newton 绝对容差
            rtol: 局部 Newton 相对容差
            max_iter: 局部 Newton 最大迭代次数

        Raises:
            MaterialConfigurationError: 参数非法
        """
        self.elastic = IsotropicElastic(G, K)
        self.yield_fn = VonMises()
        self.hardening = IsotropicHardening(yield_stress, Hi=Hi, Y=Y, expD=expD)
        self.kinematic = KinematicHardening(Hk)

        self.return_mapping = RadialReturn(
            self.elastic, self.yield_fn, self.hardening, self.kinematic,
            tolerance=tolerance, rtol=rtol, max_iter=max_iter
        )
        self.uniaxial_return = UniaxialReturn(
            self.elastic, self.hardening, self.kinematic,
            tolerance=tolerance, rtol=rtol, max_iter=max_iter
        )

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return self._capabilities

    @property
    def stress_type(self):
        return 'cauchy'

    @property
    def mu(self) -> float:
        """剪切模量"""
        return self.elastic.mu

    @property
    def K(self) -> float:
        """体积模量"""
        return self.elastic.K

    def create_state(self, mode: MaterialMode = MaterialMode.THREE_D) -> PlasticState:
        """创建初始材料状态"""
        self.check_mode(mode)
        return PlasticState(mode)

    def committed_gradient(self, state: PlasticState) -> np.ndarray:
        return state.strain.copy()

    def _check_gradient(self, gradient: np.ndarray, size: int) -> np.ndarray:
        gradient = np.asarray(gradient, dtype=float)
        if gradient.shape != (size,):
            raise ValueError(f"Expected a vector of {size} components, got shape {gradient.shape}")
        return gradient

    def evaluate_stress(self, strain: np.ndarray, handle: TrialHandle) -> np.ndarray:
        """
        由总应变计算应力

        算法流程:
        1. 弹性预测 ξ_trial = 2G·dev(ε - ε_p) - α
        2. 径向返回 (若需要)
        3. 更新塑性应变、κ、背应力并写入临时状态

        Args:
            strain: 总应变约化向量 (工程剪应变)
            handle: 试探句柄

        Returns:
            应力约化向量
        """
        mode = handle.mode
        self.check_mode(mode)
        strain = self._check_gradient(strain, mode.size)
        committed = handle.committed

        if mode == MaterialMode.ONE_D:
            return self._evaluate_uniaxial(strain, handle)

        xi_trial, mean_stress = self.return_mapping.predict(
            strain, committed.plastic_strain, committed.back_stress, mode
        )
        result = self.return_mapping.apply(xi_trial, committed.kappa, mode)

        plastic_strain = committed.plastic_strain.copy()
        back_stress = committed.back_stress.copy()
        stress_dev = xi_trial + committed.back_stress
        if result.is_plastic:
            n = result.normal
            plastic_strain += result.d_kappa * n * tensors.shear_weights(mode)
            back_stress = self.kinematic.update_back_stress(
                committed.back_stress, committed.kappa, result.kappa, n
            )
            stress_dev = stress_dev - 2.0 * self.elastic.mu * result.d_kappa * n

        stress = tensors.deviatoric_volumetric_sum(stress_dev, mean_stress, mode)

        temp = handle.state
        temp.stress = stress
        temp.strain = strain.copy()
        temp.kappa = result.kappa
        temp.plastic_strain = plastic_strain
        temp.back_stress = back_stress
        temp.trial_stress_dev = xi_trial
        return stress.copy()

    def _evaluate_uniaxial(self, strain: np.ndarray, handle: TrialHandle) -> np.ndarray:
        committed = handle.committed
        xi_trial = self.uniaxial_return.predict(strain, committed.plastic_strain, committed.back_stress)
        result = self.uniaxial_return.apply(xi_trial, committed.kappa)

        plastic_strain = committed.plastic_strain + result.d_kappa * result.normal
        hk_increment = (
            self.kinematic.get_back_stress_modulus(result.kappa)
            - self.kinematic.get_back_stress_modulus(committed.kappa)
        )
        back_stress = committed.back_stress + hk_increment * result.normal
        stress = self.elastic.E * (strain - plastic_strain)

        temp = handle.state
        temp.stress = stress
        temp.strain = strain.copy()
        temp.kappa = result.kappa
        temp.plastic_strain = plastic_strain
        temp.back_stress = back_stress
        temp.trial_stress_dev = xi_trial
        return stress.copy()

    def evaluate_tangent(self, mode: TangentMode, handle: TrialHandle) -> np.ndarray:
        """
        算法一致切线 (或弹性刚度)

        Δκ 由临时/已提交 κ 之差恢复；Δκ = 0 时返回弹性矩阵。
        """
        state = handle.state
        self.check_mode(state.mode)
        if mode == TangentMode.ELASTIC:
            return self.elastic.stiffness_matrix(state.mode)

        kappa_increment = state.kappa - handle.committed.kappa
        if state.mode == MaterialMode.ONE_D:
            return self.uniaxial_return.consistent_tangent(kappa_increment, state.kappa)

        if kappa_increment <= 0.0 or state.trial_stress_dev is None:
            return self.elastic.stiffness_matrix(state.mode)

        xi_trial = state.trial_stress_dev
        return self.return_mapping.consistent_tangent(
            state.mode,
            np.sqrt(1.5) * kappa_increment,
            self.yield_fn.norm(xi_trial, state.mode),
            self.yield_fn.gradient(xi_trial, state.mode),
            state.kappa,
        )

    def give_ip_value(self, state: PlasticState, name: str) -> np.ndarray:
        """
        查询积分点内变量

        Args:
            state: 材料状态
            name: 'plastic_strain' (完整 6 分量工程形式), 'kappa', 'back_stress'

        Raises:
            ValueError: 未知的变量名
        """
        if name == 'plastic_strain':
            return tensors.full_form(state.plastic_strain, state.mode, engineering=True)
        if name == 'kappa':
            return np.array([state.kappa])
        if name == 'back_stress':
            return tensors.full_form(state.back_stress, state.mode)
        raise ValueError(f"Unknown internal state variable '{name}'")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(G={self.mu:.2e}, K={self.K:.2e}, "
            f"hardening={self.hardening}, kinematic={self.kinematic})"
        )
