"""Registry of typing rules for the Pie checker.

Maps core expression classes to the handler functions that implement the
synthesis, checking and type-formation judgments. The checker consults these
tables before falling back to its generic mode switches.
"""

from pie.core import (
    Absurd,
    Add1,
    Application,
    Atom,
    Car,
    Cdr,
    Cong,
    Cons,
    Either,
    Equal,
    Head,
    IndAbsurd,
    IndEither,
    IndEqual,
    IndList,
    IndNat,
    IndVec,
    IterNat,
    Lambda,
    Left,
    List,
    ListCons,
    Nat,
    Nil,
    Pi,
    Quote,
    RecList,
    RecNat,
    Replace,
    Right,
    Same,
    Sigma,
    Sole,
    Symm,
    Tail,
    The,
    Todo,
    Trans,
    Trivial,
    Universe,
    Var,
    Vec,
    VecCons,
    VecNil,
    WhichNat,
    Zero,
)
from pie.checking.rules.function_rules import (
    check_lambda,
    check_todo,
    synth_application,
    synth_pi,
    synth_the,
    synth_todo,
    synth_universe,
    synth_var,
    type_pi,
    type_todo,
    type_universe,
)
from pie.checking.rules.pair_rules import check_cons, synth_car, synth_cdr, synth_sigma, type_sigma
from pie.checking.rules.nat_rules import (
    synth_add1,
    synth_ind_nat,
    synth_iter_nat,
    synth_nat,
    synth_rec_nat,
    synth_which_nat,
    synth_zero,
)
from pie.checking.rules.basic_rules import (
    synth_absurd,
    synth_atom,
    synth_ind_absurd,
    synth_quote,
    synth_sole,
    synth_trivial,
)
from pie.checking.rules.list_rules import (
    check_list_cons,
    check_nil,
    synth_ind_list,
    synth_list,
    synth_list_cons,
    synth_rec_list,
    type_list,
)
from pie.checking.rules.vec_rules import (
    check_vec_cons,
    check_vecnil,
    synth_head,
    synth_ind_vec,
    synth_tail,
    synth_vec,
    type_vec,
)
from pie.checking.rules.either_rules import (
    check_left,
    check_right,
    synth_either,
    synth_ind_either,
    type_either,
)
from pie.checking.rules.equality_rules import (
    check_same,
    synth_cong,
    synth_equal,
    synth_ind_equal,
    synth_replace,
    synth_symm,
    synth_trans,
    type_equal,
)

SYNTH_RULES = {
    The: synth_the,
    Var: synth_var,
    Universe: synth_universe,
    Pi: synth_pi,
    Application: synth_application,
    Sigma: synth_sigma,
    Car: synth_car,
    Cdr: synth_cdr,
    Nat: synth_nat,
    Zero: synth_zero,
    Add1: synth_add1,
    WhichNat: synth_which_nat,
    IterNat: synth_iter_nat,
    RecNat: synth_rec_nat,
    IndNat: synth_ind_nat,
    Atom: synth_atom,
    Quote: synth_quote,
    Trivial: synth_trivial,
    Sole: synth_sole,
    Absurd: synth_absurd,
    IndAbsurd: synth_ind_absurd,
    List: synth_list,
    ListCons: synth_list_cons,
    RecList: synth_rec_list,
    IndList: synth_ind_list,
    Vec: synth_vec,
    Head: synth_head,
    Tail: synth_tail,
    IndVec: synth_ind_vec,
    Either: synth_either,
    IndEither: synth_ind_either,
    Equal: synth_equal,
    Replace: synth_replace,
    Trans: synth_trans,
    Cong: synth_cong,
    Symm: synth_symm,
    IndEqual: synth_ind_equal,
    Todo: synth_todo,
}

CHECK_RULES = {
    Lambda: check_lambda,
    Cons: check_cons,
    Nil: check_nil,
    ListCons: check_list_cons,
    VecNil: check_vecnil,
    VecCons: check_vec_cons,
    Left: check_left,
    Right: check_right,
    Same: check_same,
    Todo: check_todo,
}

TYPE_RULES = {
    Universe: type_universe,
    Pi: type_pi,
    Sigma: type_sigma,
    List: type_list,
    Vec: type_vec,
    Either: type_either,
    Equal: type_equal,
    Todo: type_todo,
}
