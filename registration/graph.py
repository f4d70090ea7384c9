from langgraph.graph import StateGraph, START, END

from registration.state import SubmissionState
from registration.validator import RegistrationValidator


class SubmissionGraphFactory:
    def __init__(self, validator: RegistrationValidator):
        self.validator = validator

    @staticmethod
    def accept_node(state: SubmissionState) -> SubmissionState:
        """
        Final point for a valid draft. The conditional edge only routes here
        when validation produced a record.
        """
        return state

    @staticmethod
    def reject_node(state: SubmissionState) -> SubmissionState:
        return state

    def build(self) -> StateGraph:
        g = StateGraph(SubmissionState)

        g.add_node("validate", self.validator.validate_state)
        g.add_node("accept", self.accept_node)
        g.add_node("reject", self.reject_node)

        g.add_edge(START, "validate")

        g.add_conditional_edges(
            "validate",
            self.validator.should_submit,
            {"accept": "accept", "reject": "reject"},
        )
        g.add_edge("accept", END)
        g.add_edge("reject", END)

        return g

    def compile(self):
        return self.build().compile()
