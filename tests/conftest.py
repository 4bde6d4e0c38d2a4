"""Pytest configuration and fixtures."""

import pytest

from doc_generator.grammars import ApexGrammar, JavaScriptGrammar
from doc_generator.services import CompletionService, DocCommentService
from doc_generator.templates import TemplateCache, TemplateStore


@pytest.fixture
def apex() -> ApexGrammar:
    return ApexGrammar()


@pytest.fixture
def js() -> JavaScriptGrammar:
    return JavaScriptGrammar()


@pytest.fixture
def template_cache() -> TemplateCache:
    return TemplateCache(TemplateStore())


@pytest.fixture
def doc_service(template_cache: TemplateCache) -> DocCommentService:
    return DocCommentService(template_cache)


@pytest.fixture
def completion_service() -> CompletionService:
    return CompletionService()


@pytest.fixture
def sample_apex_code() -> str:
    """Sample Apex class for testing."""
    return '''public with sharing class AccountService {
    public enum Tier {
        GOLD,
        SILVER = 2,
        BRONZE
    }

    public String name { get; set; }

    public AccountService(String name) {
        this.name = name;
    }

    @AuraEnabled(cacheable=true)
    public static List<Account> findAccounts(String query, Map<String, Integer> limits) {
        Integer total = 0;
        return [SELECT Id FROM Account];
    }

    public void save(
        Account record, // the record
        Boolean allOrNone
    ) {
        insert record;
    }
}'''


@pytest.fixture
def sample_lwc_code() -> str:
    """Sample LWC component for testing."""
    return '''import { LightningElement, api } from 'lwc';

export default class Greeter extends LightningElement {
    @api
    recordId = '';

    greet(salutation, { loud = false } = {}) {
        return `${salutation} ${this.recordId}`;
    }
}

export function add(a, b = 2) {
    return a + b;
}

const double = x => x * 2;
const label = 'Hello';'''


@pytest.fixture
def sample_aura_helper() -> str:
    """Sample Aura helper for testing."""
    return '''// helper for the account card
({
    loadAccounts: function (component, helper) {
        component.set("v.loading", true);
    }
})'''
