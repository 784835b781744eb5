from api.routes.problem import ProblemController, StatementController

__all__ = ["ProblemController", "StatementController"]
