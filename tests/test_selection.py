"""Tests for Selection."""

import pytest

from fakes import FakeClient, FakeElement
from webselect import (
    ComparisonError,
    ElementActionError,
    ElementIndexError,
    ElementNotFoundError,
    ElementRetrievalError,
    EmptySelectionError,
    MultiSelection,
    MultipleElementsError,
    NotASelectionError,
    Selection,
    Selector,
)


@pytest.fixture
def client():
    """Create a fake client."""
    return FakeClient()


@pytest.fixture
def element():
    """Create a fake element."""
    return FakeElement()


@pytest.fixture
def selection(client):
    """Create a selection of '#selector'."""
    return Selection(client).find("#selector")


class TestResolution:
    """Tests for resolving chains through parent elements."""

    @pytest.fixture
    def parents(self, client):
        """Two parents with two children each."""
        parent_one = FakeElement([FakeElement(), FakeElement()])
        parent_two = FakeElement([FakeElement(), FakeElement()])
        client.elements = [parent_one, parent_two]
        return parent_one, parent_two

    def test_parents_retrieved_from_client(self, client, parents, selection):
        """Test the first segment is looked up in the client."""
        selection.find_xpath("children").count()
        assert client.selector == Selector(using="css selector", value="#selector")

    def test_children_retrieved_from_each_parent(self, parents, selection):
        """Test later segments are looked up in every parent."""
        selection.find_xpath("children").count()
        for parent in parents:
            assert parent.selector == Selector(using="xpath", value="children")

    def test_all_children_counted(self, parents, selection):
        """Test results are flattened across parents."""
        assert selection.find_xpath("children").count() == 4

    def test_indices_applied_per_segment(self, client, parents, selection):
        """Test indexed segments select one match before descending."""
        parent_one, parent_two = parents

        selection.at(1).find_xpath("children").at(1).click()

        assert client.selector == Selector(
            using="css selector", value="#selector", index=1, indexed=True
        )
        assert parent_one.selector is None
        assert parent_two.selector == Selector(
            using="xpath", value="children", index=1, indexed=True
        )
        assert parent_two.elements[1].calls == ["click"]
        assert parent_two.elements[0].calls == []

    def test_empty_selection(self, client):
        """Test counting an empty selection."""
        with pytest.raises(ElementRetrievalError) as exc_info:
            Selection(client).count()
        assert str(exc_info.value) == "failed to retrieve elements for '': empty selection"
        assert isinstance(exc_info.value.cause, EmptySelectionError)
        assert client.lookups == 0

    def test_parent_retrieval_fails(self, client, parents, selection):
        """Test a client failure is wrapped with the chain."""
        client.error = RuntimeError("some error")
        with pytest.raises(ElementRetrievalError) as exc_info:
            selection.find_xpath("children").count()
        assert str(exc_info.value) == (
            "failed to retrieve elements for 'CSS: #selector | XPath: children': some error"
        )
        assert exc_info.value.__cause__ is client.error

    def test_child_retrieval_fails(self, parents, selection):
        """Test a failure in any parent aborts resolution."""
        parents[1].error = RuntimeError("some error")
        with pytest.raises(ElementRetrievalError, match="some error") as exc_info:
            selection.find_xpath("children").count()
        assert str(exc_info.value) == (
            "failed to retrieve elements for 'CSS: #selector | XPath: children': some error"
        )

    def test_first_index_out_of_range(self, parents, selection):
        """Test the message reports the highest valid index."""
        with pytest.raises(ElementRetrievalError) as exc_info:
            selection.at(2).click()
        assert str(exc_info.value) == (
            "failed to retrieve element with 'CSS: #selector [2]': element index out of range (>1)"
        )
        assert isinstance(exc_info.value.cause, ElementIndexError)

    def test_subsequent_index_out_of_range(self, parents, selection):
        """Test an out of range index deeper in the chain."""
        with pytest.raises(ElementRetrievalError) as exc_info:
            selection.at(0).find("#selector").at(2).click()
        assert str(exc_info.value) == (
            "failed to retrieve element with 'CSS: #selector [0] | CSS: #selector [2]': "
            "element index out of range (>1)"
        )

    def test_index_on_empty_match(self, client, selection):
        """Test indexing when nothing matched."""
        with pytest.raises(ElementRetrievalError, match=r"element index out of range \(>-1\)"):
            selection.at(0).click()

    def test_no_caching_between_calls(self, client, selection, element):
        """Test each operation resolves again."""
        client.elements = [element]
        selection.click()
        selection.click()
        assert client.lookups == 2


class TestSingleElement:
    """Tests for single element enforcement."""

    def test_requests_with_selector(self, client, selection, element):
        """Test the client is asked with the selection's selector."""
        client.elements = [element]
        selection.click()
        assert client.selector == Selector(using="css selector", value="#selector")

    def test_client_failure(self, client, selection):
        """Test client errors use the singular message."""
        client.error = RuntimeError("some error")
        with pytest.raises(ElementRetrievalError) as exc_info:
            selection.click()
        assert str(exc_info.value) == "failed to retrieve element with 'CSS: #selector': some error"

    def test_no_elements(self, client, selection):
        """Test zero matches."""
        client.elements = []
        with pytest.raises(ElementNotFoundError) as exc_info:
            selection.click()
        assert str(exc_info.value) == "failed to retrieve element with 'CSS: #selector': no element found"

    def test_multiple_elements(self, client, selection, element):
        """Test several matches without an index."""
        client.elements = [element, element]
        with pytest.raises(MultipleElementsError) as exc_info:
            selection.click()
        assert str(exc_info.value) == (
            "failed to retrieve element with 'CSS: #selector': multiple elements (2) were selected"
        )
        assert exc_info.value.count == 2

    def test_empty_selection_single(self, client):
        """Test single element operations on an empty selection."""
        with pytest.raises(ElementRetrievalError) as exc_info:
            Selection(client).click()
        assert str(exc_info.value) == "failed to retrieve element with '': empty selection"


class TestFind:
    """Tests for Selection.find()."""

    def test_on_empty_selection(self, client):
        """Test adding the first CSS selector."""
        assert str(Selection(client).find("#selector")) == "CSS: #selector"

    def test_after_xpath(self, selection):
        """Test CSS after XPath starts a new segment."""
        xpath = selection.find_xpath("//subselector")
        assert str(xpath.find("#subselector")) == (
            "CSS: #selector | XPath: //subselector | CSS: #subselector"
        )

    def test_after_unindexed_css(self, selection):
        """Test CSS after unindexed CSS is merged."""
        assert str(selection.find("#subselector")) == "CSS: #selector #subselector"

    def test_after_indexed_css(self, selection):
        """Test CSS after indexed CSS starts a new segment."""
        assert str(selection.at(0).find("#subselector")) == "CSS: #selector [0] | CSS: #subselector"

    def test_siblings_do_not_overwrite_each_other(self, client):
        """Test two children derived from one parent stay independent."""
        parent = Selection(client).find_xpath("//one").find_xpath("//two").find_xpath("//parent")
        first_child = parent.find("#firstChild")
        second_child = parent.find("#secondChild")
        assert str(first_child) == "XPath: //one | XPath: //two | XPath: //parent | CSS: #firstChild"
        assert str(second_child) == "XPath: //one | XPath: //two | XPath: //parent | CSS: #secondChild"
        assert str(parent) == "XPath: //one | XPath: //two | XPath: //parent"

    def test_siblings_of_indexed_parent(self, client):
        """Test children of an indexed XPath parent stay independent."""
        parent = Selection(client).find_xpath("//parent").at(1)
        first_child = parent.find("#a")
        parent.find("#b")
        assert str(first_child) == "XPath: //parent [1] | CSS: #a"

    def test_shares_client(self, client, selection):
        """Test derived selections keep the client."""
        assert selection.find("#a").client is client


class TestChainBuilding:
    """Tests for the remaining chain builders."""

    def test_find_xpath(self, selection):
        """Test adding an XPath selector."""
        assert str(selection.find_xpath("//subselector")) == "CSS: #selector | XPath: //subselector"

    def test_find_link(self, selection):
        """Test adding a link text selector."""
        assert str(selection.find_link("some text")) == 'CSS: #selector | Link: "some text"'

    def test_find_link_selector(self, client, selection, element):
        """Test link text is sent with the link text strategy."""
        client.elements = [element]
        Selection(client).find_link("some text").click()
        assert client.selector == Selector(using="link text", value="some text")

    def test_find_by_label(self, selection):
        """Test adding a label selector."""
        assert str(selection.find_by_label("label name")) == (
            'CSS: #selector | XPath: //input[@id=(//label[normalize-space(text())="label name"]/@for)]'
            ' | //label[normalize-space(text())="label name"]/input'
        )

    def test_all(self, selection):
        """Test all() returns a MultiSelection."""
        multi = selection.all()
        assert isinstance(multi, MultiSelection)
        assert str(multi) == "CSS: #selector - All"
        assert multi.chain is selection.chain

    def test_string(self, selection):
        """Test separated rendering."""
        assert str(selection.find_xpath("//subselector")) == "CSS: #selector | XPath: //subselector"

    def test_string_with_indices(self, selection):
        """Test indices are rendered per segment."""
        assert str(selection.at(2).find_xpath("//subselector").at(1)) == (
            "CSS: #selector [2] | XPath: //subselector [1]"
        )

    def test_example_rendering(self, client):
        """Test a mixed chain."""
        assert str(Selection(client).find("#a").find_xpath("b").at(1)) == "CSS: #a | XPath: b [1]"

    def test_at_on_empty_selection(self, client):
        """Test at() without any selector."""
        with pytest.raises(EmptySelectionError):
            Selection(client).at(0)

    def test_repr(self, selection):
        """Test repr shows the chain."""
        assert repr(selection) == "<Selection 'CSS: #selector'>"


class TestCount:
    """Tests for Selection.count()."""

    @pytest.fixture(autouse=True)
    def two_elements(self, client, element):
        """Client returns two elements."""
        client.elements = [element, element]

    def test_requests_with_selector(self, client, selection):
        """Test the client is asked with the selection's selector."""
        selection.count()
        assert client.selector == Selector(using="css selector", value="#selector")

    def test_returns_count(self, selection):
        """Test the number of elements is returned."""
        assert selection.count() == 2

    def test_client_failure(self, client, selection):
        """Test client errors use the plural message."""
        client.error = RuntimeError("some error")
        with pytest.raises(ElementRetrievalError) as exc_info:
            selection.count()
        assert str(exc_info.value) == "failed to retrieve elements for 'CSS: #selector': some error"


class TestEqualsElement:
    """Tests for Selection.equals_element()."""

    @pytest.fixture
    def other_client(self):
        """Client of the other selection."""
        return FakeClient()

    @pytest.fixture
    def other_element(self, other_client):
        """Element the other selection resolves to."""
        other_element = FakeElement()
        other_client.elements = [other_element]
        return other_element

    @pytest.fixture
    def other_selection(self, other_client, other_element):
        """Selection to compare with."""
        return Selection(other_client).find("#other_selector")

    @pytest.fixture(autouse=True)
    def single_element(self, client, element):
        """Client returns one element."""
        client.elements = [element]

    def test_ensures_single_element(self, client, element, selection, other_selection):
        """Test this selection must resolve to one element."""
        client.elements = [element, element]
        with pytest.raises(MultipleElementsError) as exc_info:
            selection.equals_element(other_selection)
        assert str(exc_info.value) == (
            "failed to retrieve element with 'CSS: #selector': multiple elements (2) were selected"
        )

    def test_ensures_other_single_element(self, other_client, element, selection, other_selection):
        """Test the other selection must resolve to one element."""
        other_client.elements = [element, element]
        with pytest.raises(MultipleElementsError) as exc_info:
            selection.equals_element(other_selection)
        assert str(exc_info.value) == (
            "failed to retrieve element with 'CSS: #other_selector': multiple elements (2) were selected"
        )

    def test_compares_elements(self, element, other_element, selection, other_selection):
        """Test the resolved elements are compared."""
        selection.equals_element(other_selection)
        assert element.compared_with is other_element

    def test_not_a_selection(self, client, selection):
        """Test comparing with something else."""
        with pytest.raises(NotASelectionError) as exc_info:
            selection.equals_element("not a selection")
        assert str(exc_info.value) == "provided object is not a selection"
        assert isinstance(exc_info.value, TypeError)
        assert client.lookups == 0

    def test_multi_selection_is_not_a_selection(self, selection):
        """Test a MultiSelection cannot be compared."""
        with pytest.raises(NotASelectionError):
            selection.equals_element(selection.all())

    def test_comparison_fails(self, element, selection, other_selection):
        """Test comparison errors name both selections."""
        element.equal_error = RuntimeError("some error")
        with pytest.raises(ComparisonError) as exc_info:
            selection.equals_element(other_selection)
        assert str(exc_info.value) == (
            "failed to compare 'CSS: #selector' to 'CSS: #other_selector': some error"
        )

    def test_equal(self, element, selection, other_selection):
        """Test equal elements."""
        element.equal = True
        assert selection.equals_element(other_selection) is True

    def test_not_equal(self, element, selection, other_selection):
        """Test different elements."""
        element.equal = False
        assert selection.equals_element(other_selection) is False


class TestElementOperations:
    """Tests for operations delegated to the resolved element."""

    @pytest.fixture(autouse=True)
    def single_element(self, client, element):
        """Client returns one element."""
        client.elements = [element]

    def test_click(self, element, selection):
        """Test clicking."""
        selection.click()
        assert element.calls == ["click"]

    def test_text(self, element, selection):
        """Test reading text."""
        element.text = "hello"
        assert selection.text() == "hello"

    def test_attribute(self, element, selection):
        """Test reading an attribute."""
        element.attributes["href"] = "/home"
        assert selection.attribute("href") == "/home"
        assert selection.attribute("missing") is None

    def test_css(self, element, selection):
        """Test reading a CSS property."""
        element.css["color"] = "red"
        assert selection.css("color") == "red"

    def test_states(self, element, selection):
        """Test state checks."""
        element.selected = True
        element.displayed = True
        element.enabled = False
        assert selection.selected() is True
        assert selection.visible() is True
        assert selection.enabled() is False

    def test_fill_clears_first(self, element, selection):
        """Test fill() clears then types."""
        selection.fill("some text")
        assert element.calls == ["clear", "send_keys"]
        assert element.keys == ["some text"]

    def test_clear_and_submit(self, element, selection):
        """Test clear() and submit()."""
        selection.clear()
        selection.submit()
        assert element.calls == ["clear", "submit"]

    def test_element_error_is_not_wrapped(self, element, selection):
        """Test errors from the element propagate unchanged."""
        error = RuntimeError("some error")
        element.action_error = error
        with pytest.raises(RuntimeError) as exc_info:
            selection.click()
        assert exc_info.value is error

    def test_resolution_error_is_wrapped(self, client, selection):
        """Test resolution errors carry the chain."""
        client.elements = []
        with pytest.raises(ElementNotFoundError, match="CSS: #selector"):
            selection.text()


class TestCheck:
    """Tests for Selection.check() and uncheck()."""

    @pytest.fixture(autouse=True)
    def checkbox(self, client, element):
        """Client returns one checkbox."""
        element.attributes["type"] = "checkbox"
        client.elements = [element]

    def test_check_unchecked(self, element, selection):
        """Test checking an unchecked box clicks it."""
        selection.check()
        assert "click" in element.calls

    def test_check_checked(self, element, selection):
        """Test checking a checked box does nothing."""
        element.selected = True
        selection.check()
        assert "click" not in element.calls

    def test_uncheck_checked(self, element, selection):
        """Test unchecking a checked box clicks it."""
        element.selected = True
        selection.uncheck()
        assert "click" in element.calls

    def test_uncheck_unchecked(self, element, selection):
        """Test unchecking an unchecked box does nothing."""
        selection.uncheck()
        assert "click" not in element.calls

    def test_not_a_checkbox(self, element, selection):
        """Test checking something that is not a checkbox."""
        element.attributes["type"] = "radio"
        with pytest.raises(ElementActionError) as exc_info:
            selection.check()
        assert str(exc_info.value) == "'CSS: #selector' does not refer to a checkbox"
        assert "click" not in element.calls
