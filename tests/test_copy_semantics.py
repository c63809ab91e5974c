#!/usr/bin/env python3
'''Unit tests for registration and the copy / clone adapters'''

from pathlib import Path
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

import copy
import unittest

from hostbind import *
from host_types import make_clone_only, make_copyable


class AdapterTestCase(unittest.TestCase):

    def setUp(self):
        self.registry = TypeRegistry()
        self.module = new_module('test')

    def tearDown(self):
        get_config().reset()

    def bind(self, name, cls):
        return bind_class(self.module, name, cls, self.registry)


class TestRegistry(AdapterTestCase):
    '''Test wrapped type registration'''

    def test_bind_exposes_class(self):
        cls = make_copyable()
        wrapped = self.bind('Value', cls)

        self.assertIs(self.module.Value, cls)
        self.assertIs(self.registry.lookup(cls), wrapped)
        self.assertIn(cls, self.registry)
        self.assertEqual(self.registry.list_by_module('test'), ['Value'])
        self.assertEqual(wrapped.qualified_name, 'test.Value')

    def test_duplicate_binding(self):
        cls = make_copyable()
        self.bind('Value', cls)

        with self.assertRaises(RegistrationError) as cm:
            self.bind('Other', cls)

        self.assertIn('test.Value', str(cm.exception))

    def test_lookup_unregistered(self):
        with self.assertRaises(RegistrationError):
            self.registry.lookup(make_copyable())

    def test_default_registry(self):
        cls = make_copyable()
        wrapped = bind_class(new_module('default_registry_test'), 'Value', cls)

        self.assertIs(get_registry().get(cls), wrapped)


class TestCopySemantics(AdapterTestCase):
    '''Test register_copy_and_deep_copy'''

    def setUp(self):
        super().setUp()
        self.wrapped = self.bind('ExampleDefCopyAndDeepCopy', make_copyable())
        register_copy_and_deep_copy(self.wrapped)
        self.cls = self.module.ExampleDefCopyAndDeepCopy

    def test_shallow_copy(self):
        x = self.cls(10)
        y = copy.copy(x)

        self.assertEqual(y, x)
        self.assertIsNot(y, x)

    def test_deep_copy(self):
        x = self.cls(20)
        y = copy.deepcopy(x)

        self.assertEqual(y, self.cls(20))
        self.assertIsNot(y, x)

    def test_memo_argument_accepted(self):
        x = self.cls(7)

        for memo in ({}, {'unrelated': object()}, None):
            with self.subTest(memo = memo):
                y = x.__deepcopy__(memo)
                self.assertEqual(y, x)
                self.assertIsNot(y, x)

    def test_copies_are_independent(self):
        x = self.cls(10)
        y = copy.copy(x)
        y.value = 11

        self.assertEqual(x.value, 10)

    def test_deep_copy_copies_nested_members(self):
        '''Container members are copied by deepcopy and shared by copy'''

        @default_copy_and_move
        class Polynomial(StrictBase):
            coeffs: list

            def __init__(self, coeffs):
                self.coeffs = coeffs

            def __eq__(self, other):
                return isinstance(other, Polynomial) and self.coeffs == other.coeffs

        register_copy_and_deep_copy(self.bind('Polynomial', Polynomial))

        x = Polynomial([1, 2])
        deep = copy.deepcopy(x)
        shallow = copy.copy(x)
        x.coeffs.append(3)

        self.assertEqual(deep.coeffs, [1, 2])
        self.assertIsNot(deep.coeffs, x.coeffs)
        self.assertIs(shallow.coeffs, x.coeffs)

    def test_deep_copy_preserves_self_reference(self):
        @default_copy_and_move
        class Node(StrictBase):
            link: object

            def __init__(self):
                self.link = self

        register_copy_and_deep_copy(self.bind('Node', Node))

        x = Node()
        y = copy.deepcopy(x)

        self.assertIsNot(y, x)
        self.assertIs(y.link, y)

    def test_operations_recorded(self):
        self.assertTrue(self.wrapped.has_operation('__copy__'))
        self.assertTrue(self.wrapped.has_operation('__deepcopy__'))

    def test_rejects_clone_only(self):
        wrapped = self.bind('ExampleDefClone', make_clone_only())

        with self.assertRaises(RegistrationError) as cm:
            register_copy_and_deep_copy(wrapped)

        message = str(cm.exception)
        self.assertIn('ExampleDefClone', message)
        self.assertIn('clone-only', message)
        self.assertIsInstance(cm.exception, TypeError)


class TestCloneSemantics(AdapterTestCase):
    '''Test register_clone'''

    def setUp(self):
        super().setUp()
        self.wrapped = self.bind('ExampleDefClone', make_clone_only())
        register_clone(self.wrapped)
        self.cls = self.module.ExampleDefClone

    def test_clone(self):
        x = self.cls(5)
        y = x.clone()

        self.assertEqual(y, x)
        self.assertIsNot(y, x)

        # Callable through the type as well
        z = self.cls.clone(x)
        self.assertEqual(z, x)
        self.assertIsNot(z, x)

    def test_shallow_copy(self):
        x = self.cls(10)
        y = copy.copy(x)

        self.assertEqual(y, self.cls(10))
        self.assertIsNot(y, x)

    def test_deep_copy(self):
        x = self.cls(20)
        y = copy.deepcopy(x)

        self.assertEqual(y, self.cls(20))
        self.assertIsNot(y, x)

    def test_host_type_stays_non_copyable(self):
        self.assertEqual(copy_trait(self.cls), CopyTrait.CLONE_ONLY)

    def test_clone_returning_none(self):
        wrapped = self.bind('Broken', make_clone_only(clone_result = 'none'))
        register_clone(wrapped)
        x = self.module.Broken(1)

        for duplicate in (lambda v: v.clone(), copy.copy, copy.deepcopy):
            with self.assertRaises(CloneFailure) as cm:
                duplicate(x)

            self.assertIn('Broken', str(cm.exception))
            self.assertIsInstance(cm.exception, RuntimeError)

    def test_clone_returning_source(self):
        wrapped = self.bind('Aliasing', make_clone_only(clone_result = 'self'))
        register_clone(wrapped)

        with self.assertRaises(CloneFailure):
            copy.copy(self.module.Aliasing(1))

    def test_missing_clone(self):
        @no_copy_no_move
        class Locked:
            pass

        wrapped = self.bind('Locked', Locked)
        with self.assertRaises(RegistrationError) as cm:
            register_clone(wrapped)

        self.assertIn('clone()', str(cm.exception))

    def test_configured_clone_method(self):
        get_config().set('clone_method', 'Clone')
        wrapped = self.bind('Upper', make_clone_only(method = 'Clone'))
        register_clone(wrapped)
        x = self.module.Upper(3)

        self.assertTrue(wrapped.has_operation('Clone'))
        self.assertEqual(x.Clone(), x)
        self.assertEqual(copy.copy(x), x)


if __name__ == '__main__':
    unittest.main()
