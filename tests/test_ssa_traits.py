import pytest

from progstruct.ssa_traits import SSABasicBlock, SSAEnvironment, SSAStatement


class Env(SSAEnvironment):
    def __init__(self):
        self.counters = {}
        self.scopes = [{}]

    def add_variable_scope(self):
        self.scopes.append({})

    def remove_variable_scope(self):
        self.scopes.pop()

    def new_version(self, var):
        version = self.counters.get(var, 0)
        self.counters[var] = version + 1
        self.scopes[-1][var] = version
        return version

    def current(self, var):
        for scope in reversed(self.scopes):
            if var in scope:
                return scope[var]
        return None


class Stmt(SSAStatement):
    @classmethod
    def new_phi_statement(cls, var, env):
        return Phi(var)


class Phi(Stmt):
    def __init__(self, var):
        self.var = var
        self.args = set()
        self.version = None

    def variables_written(self):
        return {self.var}

    def is_phi_statement(self):
        return True

    def is_phi_statement_for(self, var):
        return self.var == var

    def ensure_phi_argument(self, env):
        version = env.current(self.var)
        if version is not None:
            self.args.add(version)

    def insert_ssa_variables(self, env):
        self.version = env.new_version(self.var)


class Assign(Stmt):
    def __init__(self, var):
        self.var = var
        self.version = None

    def variables_written(self):
        return {self.var}

    def is_phi_statement(self):
        return False

    def is_phi_statement_for(self, var):
        return False

    def ensure_phi_argument(self, env):
        raise TypeError("not a phi statement")

    def insert_ssa_variables(self, env):
        self.version = env.new_version(self.var)


class Block(SSABasicBlock):
    statement_class = Stmt

    def __init__(self, index, stmts=(), preds=(), succs=()):
        self._index = index
        self.stmts = list(stmts)
        self._preds = set(preds)
        self._succs = set(succs)

    def index(self):
        return self._index

    def predecessors(self):
        return self._preds

    def successors(self):
        return self._succs

    def statements(self):
        return self.stmts

    def prepend_statement(self, stmt):
        self.stmts.insert(0, stmt)


def test_environment_is_abstract():
    with pytest.raises(TypeError):
        SSAEnvironment()


def test_statement_is_abstract():
    with pytest.raises(TypeError):
        SSAStatement()


def test_variables_written_is_union():
    block = Block(0, [Phi("a"), Assign("b"), Assign("a")])
    assert SSABasicBlock.variables_written(block) == {"a", "b"}


def test_variables_written_empty_block():
    assert SSABasicBlock.variables_written(Block(0)) == set()


def test_has_phi_statement():
    block = Block(0, [Phi("a"), Assign("b")])
    assert SSABasicBlock.has_phi_statement(block, "a")
    assert not SSABasicBlock.has_phi_statement(block, "b")


def test_insert_phi_statement_prepends():
    block = Block(0, [Assign("b")])
    SSABasicBlock.insert_phi_statement(block, "z", Env())
    first = block.stmts[0]
    assert first.is_phi_statement_for("z")
    assert len(block.stmts) == 2
    assert SSABasicBlock.has_phi_statement(block, "z")


def test_update_phi_statements_stops_at_first_non_phi():
    env = Env()
    a_version = env.new_version("a")
    env.new_version("c")
    leading = Phi("a")
    trailing = Phi("c")
    block = Block(0, [leading, Assign("b"), trailing])
    SSABasicBlock.update_phi_statements(block, env)
    assert leading.args == {a_version}
    assert trailing.args == set()


def test_insert_ssa_variables_versions_every_statement():
    env = Env()
    stmts = [Phi("a"), Assign("a"), Assign("b")]
    block = Block(0, stmts)
    SSABasicBlock.insert_ssa_variables(block, env)
    versions = [(stmt.var, stmt.version) for stmt in stmts]
    assert len(set(versions)) == len(versions)
    assert all(version is not None for _, version in versions)
    assert env.current("a") == stmts[1].version