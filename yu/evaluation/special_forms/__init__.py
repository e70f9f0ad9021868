"""Registry of native forms for the Yu evaluator.

Maps each non-operator Native tag to the handler implementing its evaluation
rule. Handlers receive the unevaluated operand list, the current frame and the
evaluator function. Arithmetic natives are handled by
`yu.evaluation.operators.operator_form`.
"""

from yu.types.native import Native
from yu.evaluation.special_forms.begin_form import begin_form
from yu.evaluation.special_forms.define_form import define_form
from yu.evaluation.special_forms.function_form import function_form
from yu.evaluation.special_forms.quote_form import quote_form

SPECIAL_FORMS = {
    Native.BEGIN: begin_form,
    Native.DEFINE: define_form,
    Native.FUNCTION: function_form,
    Native.QUOTE: quote_form,
}
