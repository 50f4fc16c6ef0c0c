import PlanetParameters as PP

def test_derived_parameters():
    tol = 1e-2
    assert abs(PP.R_d - 287.06) < tol
    assert abs(PP.R_v - 461.52) < tol
    assert abs(PP.molmass_ratio - 1.60774) < 1e-3

def test_derived_constants_consistent():
    assert PP.R_d == PP.gas_constant/PP.molmass_dryair
    assert PP.R_v == PP.gas_constant/PP.molmass_water
    assert PP.cp_d == PP.R_d/PP.kappa_d
    assert PP.cv_d == PP.cp_d - PP.R_d
    assert PP.cv_v == PP.cp_v - PP.R_v
    assert PP.LH_f0 == PP.LH_s0 - PP.LH_v0
    assert PP.e_int_vapor_tp == PP.LH_v0 - PP.R_v*PP.standard_temperature
    assert PP.e_int_solid_tp == PP.LH_s0 - PP.LH_v0

def test_internal_energy_references():
    assert abs(PP.e_int_solid_tp - 333600.0) < 1e-3
    assert abs(PP.e_int_vapor_tp - 2374735.088) < 1e-2

def test_reference_values():
    assert PP.MSLP == PP.standard_pressure == 101325.0
    assert PP.T_triple > PP.T_freeze
    assert PP.T_icenuc < PP.T_freeze
    assert PP.T_init_min < PP.T_min < PP.T_max
    assert abs(PP.kappa_d - 0.2857) < 1e-4
