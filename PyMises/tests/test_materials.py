# 文件: PyMises/tests/test_materials.py
"""
小变形 J2 材料系统单元测试
"""

import numpy as np
import pytest
from mises.materials import (
    Capability,
    MaterialFactory,
    MaterialMode,
    MaterialPoint,
    TangentMode,
    MisesMaterial,
    FiniteStrainMisesMaterial,
    IsotropicElastic,
    VonMises,
    IsotropicHardening,
    KinematicHardening,
    RadialReturn,
    LocalConvergenceError,
    MaterialConfigurationError,
    UnsupportedMaterialModeError,
    require_capability,
)
from mises.materials import tensors
from mises.materials.plastic.return_mapping import newton_solve

G = 80000.0
K = 170000.0
SQRT_2_3 = np.sqrt(2.0 / 3.0)


def evaluate(material, point, strain, tangent_mode=TangentMode.TANGENT):
    """在 point 上开启试探并计算应力与切线 (不提交)"""
    handle = point.begin_trial()
    stress = material.evaluate_stress(strain, handle)
    tangent = material.evaluate_tangent(tangent_mode, handle)
    return handle, stress, tangent


def numerical_tangent(material, point, strain, h=1e-8):
    """中心差分切线 (每次扰动都从已提交状态重新开始)"""
    n = len(strain)
    D = np.zeros((n, n))
    for j in range(n):
        dstrain = np.zeros(n)
        dstrain[j] = h
        handle = point.begin_trial()
        plus = material.evaluate_stress(strain + dstrain, handle)
        handle = point.begin_trial()
        minus = material.evaluate_stress(strain - dstrain, handle)
        point.discard(handle)
        D[:, j] = (plus - minus) / (2 * h)
    return D


class TestIsotropicElastic:
    """测试各向同性弹性模型"""

    def test_elastic_matrix_symmetry(self):
        """测试弹性矩阵对称性"""
        elastic = IsotropicElastic(G=G, K=K)
        D = elastic.stiffness_matrix(MaterialMode.THREE_D)
        assert np.allclose(D, D.T), "弹性矩阵应对称"

    def test_elastic_matrix_positive_definite(self):
        """测试弹性矩阵正定性"""
        elastic = IsotropicElastic(G=G, K=K)
        eigenvalues = np.linalg.eigvals(elastic.stiffness_matrix(MaterialMode.THREE_D))
        assert np.all(eigenvalues > 0), "弹性矩阵应正定"

    def test_uniaxial_strain(self):
        """测试单轴应变状态"""
        elastic = IsotropicElastic(G=G, K=K)
        strain = np.array([0.001, 0, 0, 0, 0, 0])
        stress, _ = elastic.compute_stress(strain, MaterialMode.THREE_D)
        assert np.isclose(stress[0], (K + 4.0 / 3.0 * G) * 0.001, rtol=1e-12)
        assert np.isclose(stress[1], (K - 2.0 / 3.0 * G) * 0.001, rtol=1e-12)

    def test_shear_uses_engineering_strain(self):
        """测试剪切分量: τ = G·γ"""
        elastic = IsotropicElastic(G=G, K=K)
        strain = np.array([0, 0, 0, 0, 0, 0.002])
        stress, _ = elastic.compute_stress(strain, MaterialMode.THREE_D)
        assert np.isclose(stress[5], G * 0.002)

    def test_engineering_constants(self):
        """测试由 E, ν 创建"""
        E, nu = 210e3, 0.3
        elastic = IsotropicElastic.from_engineering_constants(E, nu)
        assert np.isclose(elastic.mu, E / (2 * (1 + nu)))
        assert np.isclose(elastic.K, E / (3 * (1 - 2 * nu)))
        assert np.isclose(elastic.E, E)
        assert np.isclose(elastic.nu, nu)

    def test_one_d_stiffness(self):
        """测试一维弹性模量 E = 9KG/(3K+G)"""
        elastic = IsotropicElastic(G=G, K=K)
        D = elastic.stiffness_matrix(MaterialMode.ONE_D)
        assert D.shape == (1, 1)
        assert np.isclose(D[0, 0], 9 * K * G / (3 * K + G))

    def test_invalid_moduli(self):
        """测试非法模量"""
        with pytest.raises(MaterialConfigurationError):
            IsotropicElastic(G=-1.0, K=K)
        with pytest.raises(MaterialConfigurationError):
            IsotropicElastic(G=G, K=np.inf)
        with pytest.raises(MaterialConfigurationError):
            IsotropicElastic.from_engineering_constants(210e3, 0.5)


class TestVonMises:
    """测试 Von Mises 屈服函数"""

    def test_uniaxial_yield(self):
        """测试单轴屈服: 偏应力 (2/3, -1/3, -1/3)σ 正好在屈服面上"""
        yield_fn = VonMises()
        s = np.array([2.0, -1.0, -1.0, 0, 0, 0]) / 3.0 * 250.0
        f = yield_fn.evaluate(s, 250.0, MaterialMode.THREE_D)
        assert np.isclose(f, 0, atol=1e-10)

    def test_equivalent_stress_pure_shear(self):
        """测试纯剪切等效应力 σ_eq = √3 τ"""
        yield_fn = VonMises()
        s = np.array([0, 0, 0, 0, 0, 150.0])
        assert np.isclose(yield_fn.equivalent_stress(s, MaterialMode.THREE_D), np.sqrt(3) * 150.0)

    def test_gradient_is_unit(self):
        """测试流动方向为单位张量"""
        yield_fn = VonMises()
        s = np.array([300.0, -100.0, -200.0, 10.0, 20.0, 30.0])
        n = yield_fn.gradient(s, MaterialMode.THREE_D)
        assert np.isclose(tensors.stress_norm(n, MaterialMode.THREE_D), 1.0)

    def test_zero_stress_gradient(self):
        """测试零应力时不做归一化"""
        yield_fn = VonMises()
        n = yield_fn.gradient(np.zeros(4), MaterialMode.PLANE_STRAIN)
        assert np.all(n == 0.0)


class TestHardening:
    """测试硬化模型"""

    def test_linear_hardening(self):
        """测试线性硬化"""
        h = IsotropicHardening(yield_stress=200.0, Hi=1000.0)
        assert h.get_yield_stress(0.0) == 200.0
        assert np.isclose(h.get_yield_stress(0.01), 210.0)
        assert h.get_hardening_modulus(0.5) == 1000.0

    def test_saturation_hardening(self):
        """测试饱和硬化趋于 σ0 + Y"""
        h = IsotropicHardening(yield_stress=200.0, Y=100.0, expD=50.0)
        assert np.isclose(h.get_yield_stress(10.0), 300.0)
        assert np.isclose(h.get_hardening_modulus(0.0), 100.0 * 50.0)

    def test_hardening_modulus_matches_derivative(self):
        """测试硬化模量与屈服应力的数值导数一致"""
        h = IsotropicHardening(yield_stress=200.0, Hi=500.0, Y=100.0, expD=50.0)
        kappa, dk = 0.01, 1e-7
        numerical = (h.get_yield_stress(kappa + dk) - h.get_yield_stress(kappa - dk)) / (2 * dk)
        assert np.isclose(h.get_hardening_modulus(kappa), numerical, rtol=1e-6)

    def test_kinematic_back_stress_update(self):
        """测试背应力增量沿流动方向"""
        kin = KinematicHardening(Hk=600.0)
        n = np.array([1.0, -1.0, 0.0, 0.0]) / np.sqrt(2.0)
        alpha = kin.update_back_stress(np.zeros(4), 0.0, 0.01, n)
        assert np.allclose(alpha, SQRT_2_3 * 6.0 * n)

    def test_negative_parameters_rejected(self):
        """测试负参数"""
        with pytest.raises(MaterialConfigurationError):
            IsotropicHardening(yield_stress=200.0, Hi=-1.0)
        with pytest.raises(MaterialConfigurationError):
            KinematicHardening(Hk=-5.0)


class TestRadialReturn:
    """测试径向返回算法"""

    def setup_method(self):
        """测试准备"""
        self.elastic = IsotropicElastic(G=G, K=K)
        self.yield_fn = VonMises()
        self.hardening = IsotropicHardening(yield_stress=200.0, Hi=1000.0)
        self.kinematic = KinematicHardening(0.0)
        self.return_mapping = RadialReturn(
            self.elastic, self.yield_fn, self.hardening, self.kinematic
        )

    def test_predictor_is_pure(self):
        """测试弹性预测不修改输入"""
        strain = np.array([1e-3, -1e-3, 0, 0, 0, 0])
        ep = np.zeros(6)
        alpha = np.zeros(6)
        xi, mean = self.return_mapping.predict(strain, ep, alpha, MaterialMode.THREE_D)
        assert np.allclose(xi, [160.0, -160.0, 0, 0, 0, 0])
        assert mean == 0.0
        assert np.all(ep == 0.0)

    def test_elastic_response(self):
        """测试弹性响应"""
        xi = np.array([50.0, -50.0, 0, 0, 0, 0])
        result = self.return_mapping.apply(xi, 0.0, MaterialMode.THREE_D)
        assert not result.is_plastic
        assert result.d_kappa == 0.0
        assert result.kappa == 0.0
        assert result.convergence is None

    def test_plastic_response(self):
        """测试塑性响应满足一致性条件"""
        xi = np.array([320.0, -320.0, 0, 0, 0, 0])
        result = self.return_mapping.apply(xi, 0.0, MaterialMode.THREE_D)
        assert result.is_plastic
        assert result.convergence.converged
        trial_norm = 320.0 * np.sqrt(2.0)
        final_norm = trial_norm - 2 * G * result.d_kappa
        assert np.isclose(final_norm, SQRT_2_3 * self.hardening.get_yield_stress(result.kappa), rtol=1e-10)

    def test_linear_hardening_converges_in_one_step(self):
        """测试线性硬化下 Newton 一步收敛"""
        xi = np.array([320.0, -320.0, 0, 0, 0, 0])
        result = self.return_mapping.apply(xi, 0.0, MaterialMode.THREE_D)
        assert result.convergence.iterations == 1

    def test_iteration_cap(self):
        """测试迭代上限"""
        hardening = IsotropicHardening(yield_stress=200.0, Y=100.0, expD=50.0)
        rm = RadialReturn(self.elastic, self.yield_fn, hardening, self.kinematic, max_iter=1)
        xi = np.array([320.0, -320.0, 0, 0, 0, 0])
        with pytest.raises(LocalConvergenceError) as info:
            rm.apply(xi, 0.0, MaterialMode.THREE_D)
        assert not info.value.result.converged
        assert info.value.result.iterations == 1
        assert info.value.result.residual > 1e-10

    def test_newton_relative_tolerance(self):
        """测试收敛判据 |g| < max(tolerance, rtol·scale)，rtol=0 时为纯绝对判据"""
        def residual(x):
            return 1e-9 - x, -1.0

        x, result = newton_solve(residual, 1e-10, 50, scale=1e4, rtol=1e-12)
        assert x == 0.0
        assert result.converged and result.iterations == 0

        x, result = newton_solve(residual, 1e-10, 50, scale=1e4, rtol=0.0)
        assert np.isclose(x, 1e-9)
        assert result.iterations == 1
        assert result.residual < 1e-10


class TestMisesMaterial:
    """测试小变形 J2 弹塑性材料"""

    def setup_method(self):
        """测试准备"""
        self.mat = MisesMaterial(G=G, K=K, yield_stress=200.0, Hi=1000.0)
        self.point = MaterialPoint(self.mat.create_state(MaterialMode.THREE_D))

    def test_elastic_step(self):
        """测试弹性步: 应力等于弹性预测，内变量不变"""
        strain = np.array([1e-4, -1e-4, 0, 0, 0, 0])
        handle, stress, tangent = evaluate(self.mat, self.point, strain)
        assert np.allclose(stress, [16.0, -16.0, 0, 0, 0, 0])
        assert handle.state.kappa == 0.0
        assert np.all(handle.state.plastic_strain == 0.0)
        assert np.allclose(tangent, self.mat.elastic.stiffness_matrix(MaterialMode.THREE_D))

    def test_plastic_step_on_yield_surface(self):
        """测试塑性步: 返回后应力在更新后的屈服面上"""
        strain = np.array([2e-3, -2e-3, 0, 0, 0, 0])
        handle, stress, _ = evaluate(self.mat, self.point, strain)
        kappa = handle.state.kappa
        assert kappa > 0.0
        norm = tensors.stress_norm(stress, MaterialMode.THREE_D)
        assert np.isclose(norm, SQRT_2_3 * (200.0 + 1000.0 * kappa), rtol=1e-10)
        assert np.isclose(stress[2], 0.0, atol=1e-10)

    def test_plastic_strain_is_deviatoric(self):
        """测试塑性应变无体积部分"""
        strain = np.array([3e-3, -1e-3, 5e-4, 1e-3, 0, 2e-3])
        handle, _, _ = evaluate(self.mat, self.point, strain)
        ep = handle.state.plastic_strain
        assert np.linalg.norm(ep) > 0
        assert np.isclose(ep[0] + ep[1] + ep[2], 0.0, atol=1e-15)

    def test_volumetric_decoupling(self):
        """测试体积响应: 平均应力 = 3K·ε_vol，与塑性无关"""
        strain = np.array([4e-3, -1e-3, 1e-3, 0, 5e-4, 0])
        _, stress, tangent = evaluate(self.mat, self.point, strain)
        eps_vol = strain[:3].sum() / 3.0
        assert np.isclose(stress[:3].mean(), 3.0 * K * eps_vol, rtol=1e-12)
        delta = np.array([1.0, 1.0, 1.0, 0, 0, 0])
        assert np.allclose(tangent @ delta, 3.0 * K * delta)

    def test_large_volumetric_strain_never_yields(self):
        """测试纯体积应变 (任意大小) 不引起屈服，包括已有塑性历史时"""
        mat = MisesMaterial(G=G, K=K, yield_stress=200.0, Hi=1000.0, Hk=500.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        volumetric = 0.5 * np.array([1.0, 1.0, 1.0, 0, 0, 0])
        delta = np.array([1.0, 1.0, 1.0, 0, 0, 0])

        handle, stress, _ = evaluate(mat, point, volumetric)
        assert handle.state.kappa == 0.0
        assert np.all(handle.state.plastic_strain == 0.0)
        assert np.allclose(stress, 3.0 * K * 0.5 * delta)
        point.discard(handle)

        # 先产生塑性历史 (含背应力)
        plastic = np.array([2e-3, -2e-3, 0, 0, 0, 0])
        handle, _, _ = evaluate(mat, point, plastic)
        point.commit(handle)
        committed = point.committed
        assert committed.kappa > 0.0
        assert np.linalg.norm(committed.back_stress) > 0.0

        handle, stress, _ = evaluate(mat, point, plastic + volumetric)
        state = handle.state
        assert np.isclose(state.kappa, committed.kappa, rtol=0.0, atol=1e-14)
        assert np.allclose(state.plastic_strain, committed.plastic_strain, rtol=0.0, atol=1e-14)
        assert np.allclose(state.back_stress, committed.back_stress, rtol=0.0, atol=1e-8)
        # 已提交应力为纯偏量 (tr ε = 0)，新应力 = 偏量部分 + 3K·ε_vol·δ
        assert np.allclose(stress, committed.stress + 3.0 * K * 0.5 * delta, rtol=1e-12, atol=1e-6)

    def test_consistent_tangent_matches_finite_difference(self):
        """测试一致切线与数值切线一致 (含饱和与随动硬化)"""
        mat = MisesMaterial(G=G, K=K, yield_stress=200.0, Hi=1000.0, Y=100.0, expD=50.0, Hk=500.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        strain = np.array([3e-3, -1e-3, 5e-4, 1e-3, -4e-4, 2e-3])
        handle, _, D = evaluate(mat, point, strain)
        assert handle.state.kappa > 0
        D_num = numerical_tangent(mat, point, strain, h=1e-8)
        assert np.allclose(D, D_num, rtol=1e-5, atol=1e-5 * np.abs(D).max())

    def test_tangent_symmetry(self):
        """测试切线模量对称性"""
        strain = np.array([3e-3, -1e-3, 5e-4, 1e-3, 0, 2e-3])
        _, _, D = evaluate(self.mat, self.point, strain)
        assert np.allclose(D, D.T), "切线模量应对称"

    def test_tangent_continuity_at_yield(self):
        """测试 Δκ → 0⁺ 时切线趋于连续体弹塑性切线"""
        e_yield = SQRT_2_3 * 200.0 / (2 * G * np.sqrt(2.0))
        strain = np.array([1.0, -1.0, 0, 0, 0, 0]) * e_yield * (1.0 + 1e-8)
        handle, _, D = evaluate(self.mat, self.point, strain)
        assert handle.state.kappa > 0

        n = np.array([1.0, -1.0, 0, 0, 0, 0]) / np.sqrt(2.0)
        H = 1000.0
        D_e = self.mat.elastic.stiffness_matrix(MaterialMode.THREE_D)
        D_cont = D_e - 2 * G * 3 * G / (3 * G + H) * np.outer(n, n)
        assert np.allclose(D, D_cont, atol=1e-4 * np.abs(D_e).max())

    def test_elastic_tangent_mode(self):
        """测试 ELASTIC 模式始终返回弹性矩阵"""
        strain = np.array([2e-3, -2e-3, 0, 0, 0, 0])
        _, _, D = evaluate(self.mat, self.point, strain, TangentMode.ELASTIC)
        assert np.allclose(D, self.mat.elastic.stiffness_matrix(MaterialMode.THREE_D))

    def test_monotonic_hardening(self):
        """测试κ 在提交之间单调不减"""
        kappas = []
        for scale in [1.0, 2.0, 1.0, -1.0, -3.0]:
            strain = np.array([1e-3, -1e-3, 0, 0, 0, 0]) * scale
            handle, _, _ = evaluate(self.mat, self.point, strain)
            self.point.commit(handle)
            kappas.append(self.point.committed.kappa)
        assert all(b >= a for a, b in zip(kappas, kappas[1:]))

    def test_kinematic_hardening_relative_stress(self):
        """测试随动硬化: 相对应力 ξ = s - α 在屈服面上"""
        mat = MisesMaterial(G=G, K=K, yield_stress=200.0, Hi=300.0, Hk=800.0)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        strain = np.array([2e-3, -2e-3, 0, 0, 0, 0])
        handle, stress, _ = evaluate(mat, point, strain)
        state = handle.state
        assert np.linalg.norm(state.back_stress) > 0
        xi = stress - state.back_stress
        assert np.isclose(
            tensors.stress_norm(xi, MaterialMode.THREE_D),
            SQRT_2_3 * mat.hardening.get_yield_stress(state.kappa),
            rtol=1e-10,
        )

    def test_plane_strain_matches_three_d(self):
        """测试平面应变与三维模式给出相同应力"""
        point_ps = MaterialPoint(self.mat.create_state(MaterialMode.PLANE_STRAIN))
        strain_ps = np.array([2e-3, -1e-3, 0, 1.5e-3])
        strain_3d = np.array([2e-3, -1e-3, 0, 0, 0, 1.5e-3])
        _, stress_ps, D_ps = evaluate(self.mat, point_ps, strain_ps)
        _, stress_3d, D_3d = evaluate(self.mat, self.point, strain_3d)
        index = [0, 1, 2, 5]
        assert np.allclose(stress_ps, stress_3d[index])
        assert np.allclose(D_ps, D_3d[np.ix_(index, index)])

    def test_one_d_response(self):
        """测试一维单轴应力模式"""
        point = MaterialPoint(self.mat.create_state(MaterialMode.ONE_D))
        E = 9 * K * G / (3 * K + G)

        handle, stress, D = evaluate(self.mat, point, np.array([5e-4]))
        assert np.isclose(stress[0], E * 5e-4)
        assert np.isclose(D[0, 0], E)

        handle, stress, D = evaluate(self.mat, point, np.array([1e-2]))
        kappa = handle.state.kappa
        assert kappa > 0
        assert np.isclose(stress[0], 200.0 + 1000.0 * kappa, rtol=1e-10)
        assert np.isclose(D[0, 0], E * 1000.0 / (E + 1000.0))

    def test_plane_stress_rejected(self):
        """测试平面应力模式被拒绝"""
        with pytest.raises(UnsupportedMaterialModeError):
            self.mat.create_state(MaterialMode.PLANE_STRESS)

    def test_wrong_strain_size(self):
        """测试应变分量个数错误"""
        handle = self.point.begin_trial()
        with pytest.raises(ValueError):
            self.mat.evaluate_stress(np.zeros(4), handle)

    def test_give_ip_value(self):
        """测试内变量查询"""
        point = MaterialPoint(self.mat.create_state(MaterialMode.PLANE_STRAIN))
        handle, _, _ = evaluate(self.mat, point, np.array([2e-3, -2e-3, 0, 1e-3]))
        point.commit(handle)
        state = point.committed
        ep_full = self.mat.give_ip_value(state, 'plastic_strain')
        assert ep_full.shape == (6,)
        assert np.allclose(ep_full[[0, 1, 2, 5]], state.plastic_strain)
        assert self.mat.give_ip_value(state, 'kappa')[0] == state.kappa
        with pytest.raises(ValueError):
            self.mat.give_ip_value(state, 'damage')

    def test_compute_stress_does_not_modify_input(self):
        """测试便捷接口不修改输入状态"""
        state = self.mat.create_state(MaterialMode.THREE_D)
        strain = np.array([2e-3, -2e-3, 0, 0, 0, 0])
        result = self.mat.compute_stress(strain, state)
        assert result.is_plastic
        assert state.kappa == 0.0
        assert result.state.kappa > 0.0
        assert result.stress_type == 'cauchy'


class TestCapabilities:
    """测试能力查询"""

    def test_small_strain_capabilities(self):
        mat = MisesMaterial(G=G, K=K, yield_stress=200.0)
        assert mat.has_capability(Capability.SMALL_STRAIN)
        assert mat.has_capability(Capability.STRESS_1D)
        assert not mat.has_capability(Capability.FINITE_STRAIN)
        assert not mat.has_capability(Capability.STRESS_PLANE_STRESS)

    def test_finite_strain_capabilities(self):
        mat = FiniteStrainMisesMaterial(G=G, K=K, yield_stress=200.0)
        assert mat.has_capability(Capability.FINITE_STRAIN)
        assert not mat.has_capability(Capability.STRESS_1D)

    def test_require_capability(self):
        mat = MisesMaterial(G=G, K=K, yield_stress=200.0)
        require_capability(mat, Capability.CONSISTENT_TANGENT)
        with pytest.raises(MaterialConfigurationError):
            require_capability(mat, Capability.FINITE_STRAIN)


class TestMaterialFactory:
    """测试材料工厂"""

    def test_create_elastic(self):
        """测试创建弹性材料 (永不屈服)"""
        mat = MaterialFactory.create_elastic(G=G, K=K)
        point = MaterialPoint(mat.create_state(MaterialMode.THREE_D))
        handle, _, _ = evaluate(mat, point, np.array([0.05, -0.05, 0, 0, 0, 0]))
        assert handle.state.kappa == 0.0

    def test_create_from_dict(self):
        """测试从字典创建"""
        props = {
            'G': G,
            'K': K,
            'plastic': {'yield_stress': 200.0, 'Hi': 1000.0, 'Hk': 50.0},
        }
        mat = MaterialFactory.create('Steel', props)
        assert isinstance(mat, MisesMaterial)
        assert mat.hardening.Hi == 1000.0
        assert mat.kinematic.Hk == 50.0

    def test_create_from_engineering_constants(self):
        """测试由 E, ν 创建"""
        mat = MaterialFactory.create('Steel', {'E': 210e3, 'nu': 0.3})
        assert np.isclose(mat.mu, 210e3 / 2.6)

    def test_create_finite_strain(self):
        """测试创建有限变形材料"""
        props = {'G': G, 'K': K, 'plastic': {'yield_stress': 200.0}, 'kinematics': 'finite'}
        mat = MaterialFactory.create('Steel', props)
        assert isinstance(mat, FiniteStrainMisesMaterial)
        assert mat.stress_type == 'pk1'

    def test_solver_settings(self):
        """测试局部求解器设置"""
        props = {'G': G, 'K': K, 'plastic': {'yield_stress': 200.0}, 'solver': {'max_iter': 7}}
        mat = MaterialFactory.create('Steel', props)
        assert mat.return_mapping.max_iter == 7

    def test_missing_parameters(self):
        """测试缺少参数时的错误"""
        with pytest.raises(MaterialConfigurationError):
            MaterialFactory.create('Bad', {'E': 210e3})
        with pytest.raises(ValueError):
            MaterialFactory.create('Bad', {'G': G, 'K': K, 'plastic': {'Hi': 10.0}})

    def test_invalid_entries(self):
        """测试非法条目"""
        with pytest.raises(MaterialConfigurationError):
            MaterialFactory.create('Bad', {'G': G, 'K': K, 'kinematics': 'large'})
        with pytest.raises(MaterialConfigurationError):
            MaterialFactory.create('Bad', {'G': G, 'K': K, 'plastic': {'yield_stress': 1.0, 'C': 2.0}})
        with pytest.raises(MaterialConfigurationError):
            MaterialFactory.create('Bad', {'G': G, 'K': K, 'plastic': {'yield_stress': -1.0}})


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
