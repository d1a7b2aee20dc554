import pytest

from zplcode128 import InvalidByteError, Label


class TestLabel:
    @pytest.fixture
    def label(self) -> Label:
        return Label(40, 80, dpmm=8)

    def test_empty_label(self, label: Label) -> None:
        assert label.dumpZPL() == "^XA^XZ"

    def test_origin(self, label: Label) -> None:
        label.origin(5, 10)
        label.endorigin()
        assert label.dumpZPL() == "^XA^FO40,80^FS^XZ"

    def test_origin_justification(self, label: Label) -> None:
        label.origin(1, 1, justification='2')
        assert label.code == "^XA^FO8,8,2"

    def test_invalid_justification(self, label: Label) -> None:
        with pytest.raises(AssertionError, match="invalid justification"):
            label.origin(1, 1, justification='5')

    def test_barcode_field_default(self, label: Label) -> None:
        label.barcode_field_default(2, 3.0, 10)
        assert label.code == "^XA^BY2,3.0,80"

    def test_write_text(self, label: Label) -> None:
        label.write_text("Hello", char_height=4, char_width=3)
        assert label.code == "^XA^A0N,32,24^FDHello"

    def test_code128(self, label: Label) -> None:
        label.origin(5, 5)
        label.code128("ABC1234567ABC")
        label.endorigin()
        assert label.dumpZPL() == "^XA^FO40,40^BCN,80,Y,N,N,N^FD>:ABC1>5234567>6ABC^FS^XZ"

    def test_code128_options(self, label: Label) -> None:
        label.code128(b"0123456789", height=5, orientation='R', print_interpretation_line='N')
        assert label.code == "^XA^BCR,40,N,N,N,N^FD>;0123456789"

    def test_code128_invalid_orientation(self, label: Label) -> None:
        with pytest.raises(AssertionError, match="invalid orientation"):
            label.code128("ABC", orientation='X')

    @pytest.mark.parametrize("orientation", ["", "NR"])
    def test_code128_orientation_must_be_one_letter(self, label: Label, orientation: str) -> None:
        with pytest.raises(AssertionError, match="invalid orientation"):
            label.code128("ABC", orientation=orientation)

    def test_code128_invalid_flag(self, label: Label) -> None:
        with pytest.raises(AssertionError, match="invalid check digit flag"):
            label.code128("ABC", check_digit="YN")

    def test_write_text_orientation_must_be_one_letter(self, label: Label) -> None:
        with pytest.raises(AssertionError, match="invalid orientation"):
            label.write_text("Hi", char_height=4, char_width=3, orientation="")

    def test_code128_invalid_data_leaves_label_untouched(self, label: Label) -> None:
        with pytest.raises(InvalidByteError):
            label.code128(b"ABC\x80")
        assert label.code == "^XA"
