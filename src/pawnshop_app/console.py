from __future__ import annotations

import getpass
from collections.abc import Callable
from typing import Any

from pawnshop_app.app.bootstrap import BackOfficeBootstrap
from pawnshop_app.app.state import Route
from pawnshop_app.invoices import InvoicePrinter, ShopProfile
from pawnshop_app.logger import get_logger, log_action
from pawnshop_app.ui.login_view import LoginView
from pawnshop_app.ui.order_form_view import LINE_COLUMNS as ORDER_LINE_COLUMNS
from pawnshop_app.ui.order_form_view import OrderFormView
from pawnshop_app.ui.order_search_view import ORDER_COLUMNS, OrderSearchView
from pawnshop_app.ui.pawn_form_view import LINE_COLUMNS as PAWN_LINE_COLUMNS
from pawnshop_app.ui.pawn_form_view import PawnFormView
from pawnshop_app.ui.pawn_search_view import PAWN_COLUMNS, PawnSearchView
from pawnshop_app.ui.product_form_view import ProductFormView
from pawnshop_app.ui.shared.table_printer import print_table

action_logger = get_logger("pawnshop_app.actions")

MAIN_MENU = (
    ("1", "Products"),
    ("2", "Buy / sell order"),
    ("3", "Order records"),
    ("4", "Pawn"),
    ("5", "Pawn records"),
    ("6", "Sign out"),
    ("0", "Exit"),
)


class BackOfficeConsole:
    """Menu-driven front end over the page views."""

    def __init__(
        self,
        bootstrap: BackOfficeBootstrap,
        printer: InvoicePrinter | None = None,
        shop: ShopProfile | None = None,
        input_fn: Callable[[str], str] = input,
        password_fn: Callable[[str], str] = getpass.getpass,
        out: Callable[[str], None] = print,
    ) -> None:
        self.bootstrap = bootstrap
        self.printer = printer or InvoicePrinter()
        self.shop = shop or ShopProfile()
        self._input = input_fn
        self._password = password_fn
        self._out = out

    def _ask(self, prompt: str, default: Any = "") -> str:
        value = self._input(prompt).strip()
        return value if value else str(default if default is not None else "")

    def _log(self, section: str, action: str, record_id: object | None, ok: bool) -> None:
        log_action(
            action_logger,
            section,
            action,
            staff_phone=self.bootstrap.state.phone_number,
            record_id=record_id,
            ok=ok,
        )

    def _message(self, text: str) -> None:
        if text:
            self._out(text)

    def run(self) -> int:
        self.bootstrap.start()
        while True:
            if self.bootstrap.state.route is Route.LOGIN:
                if not self._sign_in():
                    return 0
                continue
            self._out("\nPawnshop back office")
            for key, label in MAIN_MENU:
                self._out(f"{key}. {label}")
            option = self._ask("Select an option: ").lower()
            if option == "1":
                self._products()
            elif option == "2":
                self._order_form()
            elif option == "3":
                self._order_records()
            elif option == "4":
                self._pawn_form()
            elif option == "5":
                self._pawn_records()
            elif option == "6":
                self.bootstrap.sign_out()
                self._log("auth", "sign_out", None, True)
            elif option in {"0", "q"}:
                return 0
            else:
                self._out("Unknown option.")

    def _sign_in(self) -> bool:
        view = LoginView(service=self.bootstrap.auth_service)
        self._out(f"\n{view.title}")
        view.phone_number = self._ask("Phone number (empty to exit): ")
        if not view.phone_number:
            return False
        view.password = self._password("Password: ")
        ok = view.submit()
        self._message(view.response_message)
        self._log("auth", "sign_in", None, ok)
        if ok:
            self.bootstrap.start()
        return True

    def _products(self) -> None:
        view = ProductFormView(service=self.bootstrap.product_service)
        view.load()
        while True:
            rendered = view.render()
            print_table("Products", rendered["rows"], rendered["columns"], out=self._out)
            self._out(f"Next product ID: {rendered['next_product_id'] or '-'}")
            if rendered["state"]["status"] == "no_next_id":
                self._out(rendered["state"]["message"])
            self._message(view.response_message)
            option = self._ask("[s]earch [a]dd [e]dit [d]elete [b]ack: ").lower()
            if option == "s":
                view.search_input = self._ask("Product ID or name (empty for all): ")
                view.search()
            elif option == "a":
                view.product_name = self._ask("Name: ")
                view.product_price = _to_float(self._ask("Price: ", 0))
                view.product_amount = _to_int(self._ask("Amount: ", 0))
                self._log("products", "create", view.product_name, view.submit())
            elif option == "e":
                view.search_input = self._ask("Product ID (empty to edit by name): ")
                view.product_name = self._ask("Name: ")
                view.product_price = _to_float(self._ask("New price (empty to keep): ", 0))
                view.product_amount = _to_int(self._ask("New amount (empty to keep): ", 0))
                self._log("products", "edit", view.search_input or view.product_name, view.edit())
            elif option == "d":
                view.search_input = self._ask("Product ID (empty to delete by name): ")
                if not view.search_input:
                    view.product_name = self._ask("Name: ")
                self._log("products", "delete", view.search_input or view.product_name, view.delete())
            elif option == "b":
                return

    def _edit_lines(self, view: OrderFormView | PawnFormView, columns: list[tuple[str, str]]) -> None:
        while True:
            rendered = view.render()
            rows = [{"no": idx, **line} for idx, line in enumerate(rendered["lines"], start=1)]
            print_table("Lines", rows, [("no", "#"), *columns], out=self._out)
            self._out(f"Total: {rendered['total']:g}")
            option = self._ask("[a]dd line [e]dit line [r]emove line [d]one: ").lower()
            if option == "a":
                view.add_line()
                index = len(view.lines) - 1
                for key, label in columns:
                    view.update_line(index, key, self._ask(f"{label}: "))
            elif option == "e":
                index = _to_int(self._ask("Line #: ")) - 1
                for key, label in columns:
                    value = self._ask(f"{label} (empty to keep): ")
                    if value:
                        view.update_line(index, key, value)
            elif option == "r":
                view.remove_line(_to_int(self._ask("Line #: ")) - 1)
            elif option == "d":
                return

    def _order_form(self) -> None:
        view = OrderFormView(service=self.bootstrap.order_service, printer=self.printer, shop=self.shop)
        view.initialize()
        while True:
            self._out(f"\nOrder {view.order_id or '-'} | customer {view.effective_customer_id or '-'}")
            self._message(view.response_message)
            option = self._ask("[c]ustomer [l]ines [s]ubmit [u]pdate [x] cancel [p]rint [b]ack: ").lower()
            if option == "c":
                view.phone_number = self._ask("Phone number: ", view.phone_number)
                if not view.search_customer():
                    view.customer_name = self._ask("Customer name: ", view.customer_name)
                    view.address = self._ask("Address: ", view.address)
                view.order_date = self._ask("Order date: ", view.order_date)
                view.invoice_number = self._ask("Invoice number: ", view.invoice_number)
                view.order_deposit = _to_float(self._ask("Deposit: ", view.order_deposit))
            elif option == "l":
                self._edit_lines(view, ORDER_LINE_COLUMNS)
            elif option == "s":
                order_id = view.order_id
                self._log("orders", "create", order_id, view.submit())
            elif option == "u":
                self._log("orders", "update", view.order_id, view.update())
            elif option == "x":
                view.cancel()
            elif option == "p":
                printed_id = self._ask("Order ID: ", view.last_order_id)
                path = view.print_invoice(printed_id)
                self._log("orders", "print_invoice", printed_id, path is not None)
                if path:
                    self._out(f"Invoice written to {path}")
            elif option == "b":
                return

    def _pawn_form(self) -> None:
        view = PawnFormView(service=self.bootstrap.pawn_service, printer=self.printer, shop=self.shop)
        view.initialize()
        while True:
            self._out(f"\nPawn {view.pawn_id or '-'} | customer {view.effective_customer_id or '-'}")
            self._message(view.response_message)
            option = self._ask("[c]ustomer [l]ines [s]ubmit [e]dit [r]eset [p]rint [b]ack: ").lower()
            if option == "c":
                view.phone_number = self._ask("Phone number: ", view.phone_number)
                if not view.search_customer():
                    view.cus_name = self._ask("Customer name: ", view.cus_name)
                    view.address = self._ask("Address: ", view.address)
                view.pawn_date = self._ask("Pawn date: ", view.pawn_date)
                view.pawn_expire_date = self._ask("Expire date: ", view.pawn_expire_date)
                view.pawn_deposit = _to_float(self._ask("Deposit: ", view.pawn_deposit))
            elif option == "l":
                self._edit_lines(view, PAWN_LINE_COLUMNS)
            elif option == "s":
                pawn_id = view.pawn_id
                self._log("pawns", "create", pawn_id, view.submit())
            elif option == "e":
                view.pawn_id = self._ask("Pawn ID: ", view.pawn_id) or None
                self._log("pawns", "update", view.pawn_id, view.edit())
            elif option == "r":
                view.reset()
                view.response_message = ""
            elif option == "p":
                path = view.print_invoice()
                self._log("pawns", "print_invoice", view.last_pawn_id or view.pawn_id, path is not None)
                if path:
                    self._out(f"Invoice written to {path}")
            elif option == "b":
                return

    def _client_filter(self, view: OrderSearchView | PawnSearchView) -> None:
        view.search(
            cus_id=self._ask("Customer ID: "),
            cus_name=self._ask("Name: "),
            phone_number=self._ask("Phone: "),
        )

    def _order_records(self) -> None:
        view = OrderSearchView(
            client_service=self.bootstrap.client_service,
            service=self.bootstrap.order_service,
            printer=self.printer,
            shop=self.shop,
        )
        view.load()
        while True:
            rendered = view.render()
            print_table("Clients", rendered["rows"], rendered["columns"], out=self._out)
            if view.selected_client is not None or view.orders:
                print_table("Orders", rendered["orders"], ORDER_COLUMNS, out=self._out)
                for order in rendered["orders"]:
                    print_table(f"Order {order['order_id']} items", order["lines"], rendered["line_columns"], out=self._out)
            self._message(view.response_message)
            option = self._ask("[f]ilter [v]iew client [p]rint invoice [b]ack: ").lower()
            if option == "f":
                self._client_filter(view)
            elif option == "v":
                view.select_client(self._ask("Customer ID: "))
            elif option == "p":
                order_id = self._ask("Order ID: ")
                path = view.print_invoice(order_id)
                self._log("orders", "print_invoice", order_id, path is not None)
                if path:
                    self._out(f"Invoice written to {path}")
            elif option == "b":
                return

    def _pawn_records(self) -> None:
        view = PawnSearchView(
            client_service=self.bootstrap.client_service,
            service=self.bootstrap.pawn_service,
            printer=self.printer,
            shop=self.shop,
        )
        view.load()
        while True:
            rendered = view.render()
            print_table("Clients", rendered["rows"], rendered["columns"], out=self._out)
            if view.selected_client is not None or view.pawns:
                print_table("Pawns", rendered["pawns"], PAWN_COLUMNS, out=self._out)
                for pawn in rendered["pawns"]:
                    print_table(f"Pawn {pawn['pawn_id']} items", pawn["lines"], rendered["line_columns"], out=self._out)
            self._message(view.response_message)
            option = self._ask("[f]ilter [v]iew client [p]rint invoice [b]ack: ").lower()
            if option == "f":
                self._client_filter(view)
            elif option == "v":
                view.select_client(self._ask("Customer ID: "))
            elif option == "p":
                pawn_id = self._ask("Pawn ID: ")
                path = view.print_invoice(pawn_id)
                self._log("pawns", "print_invoice", pawn_id, path is not None)
                if path:
                    self._out(f"Invoice written to {path}")
            elif option == "b":
                return


def _to_float(value: str) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


def _to_int(value: str) -> int:
    try:
        return int(float(value))
    except (TypeError, ValueError):
        return 0
