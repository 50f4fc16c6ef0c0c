import numpy as np
from dataclasses import dataclass

@dataclass(frozen=True, eq=False)
class PhasePartition:
    """
    Specific contents (kg/kg) of the water phases in moist air.

    Arguments are stored as given, in the order (total, vapor, liquid,
    reserved, ice), and may be scalars or numpy arrays. `reserved` is
    carried along but not used by any formula in this module. Contents are
    expected to be non-negative with vapor + liquid + ice <= total; this is
    not checked on construction, call `validate()` where it matters.

    `gas_constant_air` subtracts the `vapor` and `liquid` slots as
    condensate, while `cp_m`, `cv_m` and the energies read `liquid` and
    `ice`. Moist, unsaturated air is described by `total` alone, e.g.
    PhasePartition(q_tot); a filled `vapor` slot lowers R_m and with it
    air density, Exner function and virtual potential temperature.

    Partitions compare by identity.
    """
    total    : float
    vapor    : float = 0.0
    liquid   : float = 0.0
    reserved : float = 0.0
    ice      : float = 0.0

    def __str__(self):
        s = ''
        s+='total    = '+str(self.total)+'\n'
        s+='vapor    = '+str(self.vapor)+'\n'
        s+='liquid   = '+str(self.liquid)+'\n'
        s+='reserved = '+str(self.reserved)+'\n'
        s+='ice      = '+str(self.ice)+'\n'
        return s

    def validate(self, rtol=1e-12):
        for name in ('total', 'vapor', 'liquid', 'ice'):
            if np.any(np.asarray(getattr(self, name)) < 0.0):
                raise ValueError('Bad phase partition: negative '+name)
        if np.any(self.vapor + self.liquid + self.ice > self.total * (1.0 + rtol)):
            raise ValueError('Bad phase partition: vapor + liquid + ice exceeds total')
        return self

q_pt0=PhasePartition(0.0)

##### Mixture coefficients
def gas_constant_air(param_set, q=q_pt0):
    return param_set.gas_constant_air(q)

def cp_m(param_set, q=q_pt0):
    cp_d = param_set.cp_d()
    cp_v = param_set.cp_v
    return cp_d + (cp_v - cp_d)*q.total + (param_set.cp_l - cp_v)*q.liquid + (param_set.cp_i - cp_v)*q.ice

def cv_m(param_set, q=q_pt0):
    cv_d = param_set.cv_d()
    cv_v = param_set.cv_v()
    return cv_d + (cv_v - cv_d)*q.total + (param_set.cv_l() - cv_v)*q.liquid + (param_set.cv_i() - cv_v)*q.ice

def moist_gas_constants(param_set, q=q_pt0):
    R_gas  = gas_constant_air(param_set, q)
    cp = cp_m(param_set, q)
    cv = cv_m(param_set, q)
    γ = cp/cv
    return (R_gas, cp, cv, γ)

##### Equation of state
def air_pressure(param_set, T, ρ, q=q_pt0):
    return gas_constant_air(param_set, q) * ρ * T

def air_density(param_set, T, p, q=q_pt0):
    return p / (gas_constant_air(param_set, q) * T)

def specific_volume(param_set, T, p, q=q_pt0):
    return (gas_constant_air(param_set, q) * T) / p

def soundspeed_air(param_set, T, q=q_pt0):
    R_m, _cp_m, _cv_m, γ = moist_gas_constants(param_set, q)
    return np.sqrt(γ*R_m*T)

##### Energies
def internal_energy(param_set, T, q=q_pt0):
    e_int_v0 = param_set.e_int_v0()
    return cv_m(param_set, q) * (T - param_set.t_0) + (q.total - q.liquid) * e_int_v0 - q.ice * (e_int_v0 + param_set.e_int_i0())

def air_temperature(param_set, e_int, q=q_pt0):
    e_int_v0 = param_set.e_int_v0()
    return param_set.t_0 + (e_int - (q.total - q.liquid) * e_int_v0 + q.ice * (e_int_v0 + param_set.e_int_i0())) / cv_m(param_set, q)

def total_energy(param_set, e_kin, e_pot, T, q=q_pt0):
    return e_kin + e_pot + internal_energy(param_set, T, q)

##### Latent heats
def latent_heat_generic(param_set, T, LH_0, Δcp):
    return LH_0 + Δcp * (T - param_set.t_0)

def latent_heat_vapor(param_set, T):
    return latent_heat_generic(param_set, T, param_set.lh_v0, param_set.cp_v - param_set.cp_l)

def latent_heat_sublim(param_set, T):
    return latent_heat_generic(param_set, T, param_set.lh_s0, param_set.cp_v - param_set.cp_i)

def latent_heat_fusion(param_set, T):
    return latent_heat_generic(param_set, T, param_set.lh_f0(), param_set.cp_l - param_set.cp_i)

##### Saturation
def saturation_vapor_pressure(param_set, T, LH_0, Δcp):
    """
    Saturation vapor pressure (Pa) from the Clausius-Clapeyron relation,
    with latent heat varying linearly in temperature (`LH_0` at `t_0`,
    slope `Δcp`), anchored at the triple point.
    """
    R_v = param_set.r_v()
    T_triple = param_set.t_triple
    return param_set.press_triple * (T/T_triple)**(Δcp/R_v) * np.exp( (LH_0 - Δcp*param_set.t_0)/R_v * (1.0 / T_triple - 1.0 / T) )

def saturation_vapor_pressure_liquid(param_set, T):
    return saturation_vapor_pressure(param_set, T, param_set.lh_v0, param_set.cp_v - param_set.cp_l)

def saturation_vapor_pressure_ice(param_set, T):
    return saturation_vapor_pressure(param_set, T, param_set.lh_s0, param_set.cp_v - param_set.cp_i)

def q_vap_saturation_from_pressure(param_set, T, ρ, p_v_sat):
    return np.minimum(1.0, p_v_sat / (ρ * param_set.r_v() * T))

def liquid_fraction(param_set, T, q=q_pt0):
    """
    Fraction of condensate that is liquid.

    Taken from the partition when it holds condensate. Otherwise all
    liquid above `t_freeze` and all ice at or below it.
    """
    q_liq = np.asarray(q.liquid, dtype=float)
    q_c   = q_liq + np.asarray(q.ice, dtype=float)     # condensate specific humidity
    heaviside = np.where(np.asarray(T) > param_set.t_freeze, 1.0, 0.0)
    frac = np.divide(q_liq, q_c, out=np.zeros(np.broadcast(q_liq, q_c).shape), where=q_c > 0.0)
    return np.where(q_c > 0.0, frac, heaviside)[()]

def liquid_fraction_ice_nucleation(param_set, T):
    """
    Liquid fraction ramping from 0 at `t_icenuc` to 1 at `t_freeze` with
    exponent `pow_icenuc`; 0 below the ramp and 1 above it.
    """
    ramp = (np.asarray(T, dtype=float) - param_set.t_icenuc) / (param_set.t_freeze - param_set.t_icenuc)
    return (np.clip(ramp, 0.0, 1.0)**param_set.pow_icenuc)[()]

##### Potential temperatures
def exner(param_set, p, q=q_pt0):
    _R_m    = gas_constant_air(param_set, q)
    _cp_m   = cp_m(param_set, q)
    return (p/param_set.p_ref_theta)**(_R_m/_cp_m)

def dry_pottemp(param_set, T, p, q=q_pt0):
    return T / exner(param_set, p, q)

def virtual_pottemp(param_set, T, p, q=q_pt0):
    """
    Virtual potential temperature (K), R_m / R_d times the dry potential
    temperature. Above the dry value for PhasePartition(q_tot); below it
    when the partition's `vapor` slot is filled, since `gas_constant_air`
    counts that slot as condensate.
    """
    return gas_constant_air(param_set, q) / param_set.r_d() * dry_pottemp(param_set, T, p, q)

def liquid_ice_pottemp(param_set, T, p, q=q_pt0):
    # latent heats of phase transitions approximated as constants
    L = param_set.lh_v0*q.liquid + param_set.lh_s0*q.ice
    return dry_pottemp(param_set, T, p, q) * (1.0 - L/(cp_m(param_set, q)*T))

def air_temperature_from_liquid_ice_pottemp(param_set, θ_liq_ice, p, q=q_pt0):
    L = param_set.lh_v0*q.liquid + param_set.lh_s0*q.ice
    return θ_liq_ice*exner(param_set, p, q) + L / cp_m(param_set, q)
