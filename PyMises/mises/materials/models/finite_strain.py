# 文件: PyMises/mises/materials/models/finite_strain.py
"""
有限变形 J2 弹塑性材料模型

乘法分解 + 超弹性框架:
- 弹性预测基于相对变形梯度 f = F·F_n⁻¹ 的等容部分 f̄ = det(f)^(-1/3)·f
- 偏量响应: s = G·dev(B̄_e)，体积响应: p = K·ln J
- 返回映射与小变形共用 RadialReturn，剪切模量以 Ḡ = G·tr(B̄)/3 代替
- 输出第一类 Piola-Kirchhoff 应力 P = τ·F⁻ᵀ，临时状态中保存 Kirchhoff 应力 τ

切线:
- evaluate_tangent: ∂P/∂F 的精确线性化 (变形梯度约化矩阵)
- spatial_tangent: Kirchhoff 应力的空间切线模量 (对称约化矩阵)
"""

from typing import FrozenSet, NamedTuple

import numpy as np

from ..errors import InvalidDeformationError
from ..interfaces import Capability, MaterialMode, TangentMode
from ..state import PlasticState, TrialHandle
from .. import tensors
from .j2_plasticity import MisesMaterial


class FiniteStrainTrial(NamedTuple):
    """有限变形弹性预测的中间量"""
    F: np.ndarray
    F_inv: np.ndarray
    J: float
    f: np.ndarray
    j_f: float
    f_bar: np.ndarray
    b_bar: np.ndarray
    trace: float
    s_trial: np.ndarray
    trial_norm: float
    g_bar: float


class FiniteStrainMisesMaterial(MisesMaterial):
    """
    有限变形 J2 弹塑性材料

    参数与 MisesMaterial 相同。支持平面应变与三维模式，
    输入为变形梯度约化向量:
    - 平面应变: [F11, F22, F33, F12, F21]
    - 三维: [F11, F22, F33, F23, F13, F12, F32, F31, F21]

    随动硬化模量 Hk 在此模型中只作为附加的等向硬化进入一致性条件，
    不跟踪背应力。

    Example:
        mat = FiniteStrainMisesMaterial(G=80e3, K=170e3, yield_stress=200.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        handle = point.begin_trial()
        P = mat.evaluate_stress(vF, handle)
        A = mat.evaluate_tangent(TangentMode.TANGENT, handle)  # ∂P/∂F
        point.commit(handle)
    """

    _capabilities = frozenset({
        Capability.STRESS_PLANE_STRAIN,
        Capability.STRESS_3D,
        Capability.FINITE_STRAIN,
        Capability.CONSISTENT_TANGENT,
    })

    @property
    def capabilities(self) -> FrozenSet[Capability]:
        return self._capabilities

    @property
    def stress_type(self):
        return 'pk1'

    def committed_gradient(self, state: PlasticState) -> np.ndarray:
        return tensors.deformation_gradient_to_vector(state.deformation_gradient, state.mode)

    def predict(self, F: np.ndarray, committed: PlasticState) -> FiniteStrainTrial:
        """
        弹性预测

        Raises:
            InvalidDeformationError: det F <= 0
        """
        J = float(np.linalg.det(F))
        if not J > 0.0:
            raise InvalidDeformationError(f"Deformation gradient has non-positive Jacobian J = {J:.3e}")

        f = F @ np.linalg.inv(committed.deformation_gradient)
        j_f = float(np.linalg.det(f))
        f_bar = j_f ** (-1.0 / 3.0) * f
        b_bar = f_bar @ committed.left_cauchy_green @ f_bar.T
        trace = float(np.trace(b_bar))
        s_trial = self.mu * (b_bar - trace / 3.0 * tensors.I2)
        return FiniteStrainTrial(
            F=F,
            F_inv=np.linalg.inv(F),
            J=J,
            f=f,
            j_f=j_f,
            f_bar=f_bar,
            b_bar=b_bar,
            trace=trace,
            s_trial=s_trial,
            trial_norm=float(np.linalg.norm(s_trial)),
            g_bar=self.mu * trace / 3.0,
        )

    def evaluate_stress(self, vF: np.ndarray, handle: TrialHandle) -> np.ndarray:
        """
        由变形梯度计算第一类 Piola-Kirchhoff 应力

        Args:
            vF: 变形梯度约化向量
            handle: 试探句柄

        Returns:
            P 的约化向量 (与 vF 同排列)
        """
        mode = handle.mode
        self.check_mode(mode)
        F = tensors.vector_to_deformation_gradient(
            self._check_gradient(vF, tensors.gradient_size(mode)),
            mode,
        )
        committed = handle.committed
        trial = self.predict(F, committed)

        result = self.return_mapping.apply(
            tensors.tensor_to_reduced(trial.s_trial, MaterialMode.THREE_D),
            committed.kappa,
            MaterialMode.THREE_D,
            shear_modulus=trial.g_bar,
        )
        s = trial.s_trial
        if result.is_plastic:
            s = (1.0 - 2.0 * trial.g_bar * result.d_kappa / trial.trial_norm) * trial.s_trial

        left_cauchy_green = s / self.mu + trial.trace / 3.0 * tensors.I2
        tau = s + self.K * np.log(trial.J) * tensors.I2
        P = tau @ trial.F_inv.T

        temp = handle.state
        temp.stress = tensors.tensor_to_reduced(tau, mode)
        temp.strain = tensors.tensor_to_reduced(0.5 * (F.T @ F - tensors.I2), mode, engineering=True)
        temp.kappa = result.kappa
        temp.left_cauchy_green = left_cauchy_green
        temp.deformation_gradient = F
        temp.trial_stress_dev = tensors.tensor_to_reduced(trial.s_trial, mode)
        return tensors.deformation_gradient_to_vector(P, mode)

    def _plastic_increment(self, mode: TangentMode, handle: TrialHandle) -> float:
        if mode == TangentMode.ELASTIC:
            return 0.0
        return max(np.sqrt(1.5) * (handle.state.kappa - handle.committed.kappa), 0.0)

    def evaluate_tangent(self, mode: TangentMode, handle: TrialHandle) -> np.ndarray:
        """
        ∂P/∂F 的一致线性化

        链式法则:
            F → f = F·F_n⁻¹ → f̄ → B̄ = f̄·B_n·f̄ᵀ → s → τ = s + K ln J·I → P = τ·F⁻ᵀ

        塑性步中 Δκ、n、Ḡ 对 B̄ 的导数由一致性条件 g(Δκ) = 0 得到。
        """
        state = handle.state
        self.check_mode(state.mode)
        trial = self.predict(state.deformation_gradient, handle.committed)
        d_kappa = self._plastic_increment(mode, handle)
        G = self.mu
        P4 = tensors.dev_projector4()

        d_f = tensors.right_product_derivative(np.linalg.inv(handle.committed.deformation_gradient))
        d_fbar = trial.j_f ** (-1.0 / 3.0) * (
            tensors.identity4() - tensors.dyad4(trial.f, np.linalg.inv(trial.f).T) / 3.0
        )
        d_b = tensors.congruence_derivative(trial.f_bar, handle.committed.left_cauchy_green)
        d_b_dF = tensors.contract4(d_b, tensors.contract4(d_fbar, d_f))

        d_s = G * P4
        s = trial.s_trial
        if d_kappa > 0.0 and trial.trial_norm > 0.0:
            n = trial.s_trial / trial.trial_norm
            kappa_new = state.kappa
            H = (
                self.hardening.get_hardening_modulus(kappa_new)
                + self.kinematic.get_back_stress_modulus_prime(kappa_new)
            )
            denom = 2.0 * trial.g_bar + 2.0 / 3.0 * H
            d_norm = G * n
            d_gbar = G / 3.0 * tensors.I2
            d_dk = (d_norm - 2.0 * d_kappa * d_gbar) / denom
            d_n = G / trial.trial_norm * (P4 - tensors.dyad4(n, n))
            d_s = (
                G * P4
                - 2.0 * tensors.dyad4(n, d_kappa * d_gbar + trial.g_bar * d_dk)
                - 2.0 * trial.g_bar * d_kappa * d_n
            )
            s = (1.0 - 2.0 * trial.g_bar * d_kappa / trial.trial_norm) * trial.s_trial

        tau = s + self.K * np.log(trial.J) * tensors.I2
        P = tau @ trial.F_inv.T
        d_tau = tensors.contract4(d_s, d_b_dF) + self.K * tensors.dyad4(tensors.I2, trial.F_inv.T)
        dP = (
            np.einsum("imkl,jm->ijkl", d_tau, trial.F_inv)
            - np.einsum("il,jk->ijkl", P, trial.F_inv)
        )
        return tensors.tensor4_to_gradient_matrix(dP, state.mode)

    def spatial_tangent(self, mode: TangentMode, handle: TrialHandle) -> np.ndarray:
        """
        Kirchhoff 应力的空间切线模量 (对称约化形式)

        C = K δ⊗δ - 2K ln J·I_sym + c̄
        c̄ = 2Ḡ P_dev - (2/3)‖s‖(n⊗δ + δ⊗n)

        塑性加载时:
        C += -β1 c̄ - 2Ḡβ3 n⊗n - 2Ḡβ4 n⊗dev(n²)
        """
        state = handle.state
        material_mode = state.mode
        self.check_mode(material_mode)
        trial = self.predict(state.deformation_gradient, handle.committed)

        delta = tensors.delta_vector(material_mode)
        projector = tensors.deviatoric_projector(material_mode)
        dd = np.outer(delta, delta)
        n_tensor = np.zeros((3, 3))
        if trial.trial_norm > 0.0:
            n_tensor = trial.s_trial / trial.trial_norm
        n = tensors.tensor_to_reduced(n_tensor, material_mode)

        C = self.K * dd - 2.0 * self.K * np.log(trial.J) * (projector + dd / 3.0)
        c_dev = (
            2.0 * trial.g_bar * projector
            - 2.0 / 3.0 * trial.trial_norm * (np.outer(n, delta) + np.outer(delta, n))
        )
        C = C + c_dev

        d_kappa = self._plastic_increment(mode, handle)
        if d_kappa > 0.0 and trial.trial_norm > 0.0:
            g_bar = trial.g_bar
            H = (
                self.hardening.get_hardening_modulus(state.kappa)
                + self.kinematic.get_back_stress_modulus_prime(state.kappa)
            )
            beta0 = 1.0 + H / (3.0 * g_bar)
            beta1 = 2.0 * g_bar * d_kappa / trial.trial_norm
            beta2 = 2.0 / 3.0 * (1.0 - 1.0 / beta0) * trial.trial_norm * d_kappa / g_bar
            beta3 = 1.0 / beta0 - beta1 + beta2
            beta4 = (1.0 / beta0 - beta1) * trial.trial_norm / g_bar

            nn = n_tensor @ n_tensor
            dev_nn = tensors.tensor_to_reduced(nn - np.trace(nn) / 3.0 * tensors.I2, material_mode)
            C = (
                C
                - beta1 * c_dev
                - 2.0 * g_bar * beta3 * np.outer(n, n)
                - 2.0 * g_bar * beta4 * np.outer(n, dev_nn)
            )
        return C

    def give_ip_value(self, state: PlasticState, name: str) -> np.ndarray:
        """
        查询积分点内变量

        Args:
            state: 材料状态
            name: 'kappa', 'left_cauchy_green' (B_e, 3x3), 'deformation_gradient' (F, 3x3)

        Raises:
            ValueError: 未知的变量名，或本模型不跟踪的变量
                ('plastic_strain', 'back_stress')
        """
        if name == 'kappa':
            return np.array([state.kappa])
        if name == 'left_cauchy_green':
            return state.left_cauchy_green.copy()
        if name == 'deformation_gradient':
            return state.deformation_gradient.copy()
        if name in ('plastic_strain', 'back_stress'):
            raise ValueError(
                f"Internal state variable '{name}' is not tracked by the finite strain model"
            )
        raise ValueError(f"Unknown internal state variable '{name}'")

    def cauchy_stress(self, handle: TrialHandle) -> np.ndarray:
        """柯西应力 σ = τ / J (约化向量)"""
        state = handle.state
        return state.stress / np.linalg.det(state.deformation_gradient)
